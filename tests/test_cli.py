"""Tests for the CLI entry point and console report formatting."""

from decimal import Decimal

import pytest

from pipcalc.cli.report import format_money, print_error, print_instruments, print_result
from pipcalc.main import main
from pipcalc.models.instrument import list_instruments, lookup_instrument
from pipcalc.models.trade import Direction, TradeResult
from pipcalc.risk.errors import InvalidBuyOrdering


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ["DEFAULT_PAIR", "LOG_LEVEL", "API_HOST", "API_PORT"]:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


def _calc_args(*extra, direction="buy", entry="1.10000", sl="1.09500",
               tp="1.11000", volume="1.0"):
    return [
        "calc", *extra,
        "--direction", direction,
        "--entry", entry,
        "--stop-loss", sl,
        "--take-profit", tp,
        "--volume", volume,
    ]


# ── Report formatting ────────────────────────────────────────────────────


class TestReport:

    def test_format_money(self):
        assert format_money(Decimal("-25000.00")) == "-25,000.00"
        assert format_money(Decimal("0.50")) == "0.50"

    def test_print_result_format(self, capsys):
        result = TradeResult(
            stop_loss_pips=Decimal("50.0"),
            take_profit_pips=Decimal("100.0"),
            potential_loss=Decimal("-500.00"),
            potential_profit=Decimal("1000.00"),
            units=Decimal("100000.0"),
            risk_reward_ratio=Decimal("2.00"),
        )
        output = print_result(lookup_instrument("EUR/USD"), Direction.BUY, result)
        assert "EUR/USD" in output
        assert "50.0 pips" in output
        assert "-500.00" in output
        assert "1,000.00" in output
        assert "100,000" in output
        assert "1:2.00" in output
        assert capsys.readouterr().out.strip() == output.strip()

    def test_print_error(self):
        output = print_error(InvalidBuyOrdering())
        assert output.startswith("Error [invalid_buy_ordering]:")

    def test_print_instruments(self):
        output = print_instruments(list_instruments())
        assert "USD/JPY" in output
        assert "0.01" in output
        assert "100,000" in output


# ── Entry point ──────────────────────────────────────────────────────────


class TestMain:

    def test_calc_success(self, capsys):
        code = main(_calc_args())
        out = capsys.readouterr().out
        assert code == 0
        assert "EUR/USD" in out
        assert "50.0 pips" in out
        assert "100.0 pips" in out
        assert "-500.00" in out
        assert "1,000.00" in out

    def test_calc_sell_jpy(self, capsys):
        code = main(_calc_args(
            "--pair", "USD/JPY", direction="sell",
            entry="110.000", sl="110.500", tp="109.000", volume="0.5",
        ))
        out = capsys.readouterr().out
        assert code == 0
        assert "-25,000.00" in out
        assert "50,000.00" in out

    def test_calc_validation_error(self, capsys):
        code = main(_calc_args(sl="1.105"))
        out = capsys.readouterr().out
        assert code == 1
        assert "invalid_buy_ordering" in out

    def test_calc_non_positive(self, capsys):
        code = main(_calc_args(volume="-1"))
        assert code == 1
        assert "non_positive_value" in capsys.readouterr().out

    def test_calc_unknown_pair(self, capsys):
        code = main(_calc_args("--pair", "XXX/YYY"))
        assert code == 1
        assert "unknown_instrument" in capsys.readouterr().out

    def test_calc_invalid_number(self, capsys):
        code = main(_calc_args(entry="abc"))
        assert code == 1
        assert "invalid_number" in capsys.readouterr().out

    def test_default_pair_from_config(self, monkeypatch, capsys):
        monkeypatch.setenv("DEFAULT_PAIR", "USD/JPY")
        code = main(_calc_args(entry="110.000", sl="109.500", tp="111.000"))
        assert code == 0
        assert "USD/JPY" in capsys.readouterr().out

    def test_pairs(self, capsys):
        assert main(["pairs"]) == 0
        out = capsys.readouterr().out
        for inst in list_instruments():
            assert inst.symbol.value in out

    def test_missing_required_flag(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["calc", "--direction", "buy"])
        assert exc_info.value.code == 2


# ── Serve ────────────────────────────────────────────────────────────────


class TestServe:

    @pytest.fixture
    def uvicorn_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append(kwargs))
        return calls

    def test_serve_uses_config_defaults(self, monkeypatch, uvicorn_calls):
        monkeypatch.setenv("API_HOST", "0.0.0.0")
        monkeypatch.setenv("API_PORT", "9001")
        assert main(["serve"]) == 0
        assert uvicorn_calls == [{"host": "0.0.0.0", "port": 9001, "log_level": "info"}]

    def test_serve_flags_override_config(self, monkeypatch, uvicorn_calls):
        monkeypatch.setenv("API_PORT", "9001")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert main(["serve", "--host", "localhost", "--port", "7000"]) == 0
        assert uvicorn_calls == [{"host": "localhost", "port": 7000, "log_level": "warning"}]
