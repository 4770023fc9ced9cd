"""Instrument metadata — the fixed table of tradeable currency pairs.

Each pair carries its pip size and standard lot size explicitly; nothing is
inferred from the symbol text.  The table is built once at import time and
exposed read-only.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from pipcalc.risk.errors import UnknownInstrument


STANDARD_LOT_UNITS = 100_000


class InstrumentSymbol(str, Enum):
    """Currency pairs supported by the calculator."""

    EUR_USD = "EUR/USD"
    GBP_USD = "GBP/USD"
    USD_JPY = "USD/JPY"
    USD_CHF = "USD/CHF"
    AUD_USD = "AUD/USD"
    USD_CAD = "USD/CAD"


@dataclass(frozen=True)
class Instrument:
    """Static metadata for one currency pair."""

    symbol: InstrumentSymbol
    pip_size: Decimal
    standard_lot_units: int = STANDARD_LOT_UNITS
    price_decimals: int = 5  # quote precision

    @property
    def base_currency(self) -> str:
        return self.symbol.value.split("/")[0]

    @property
    def counter_currency(self) -> str:
        return self.symbol.value.split("/")[1]

    @property
    def price_step(self) -> Decimal:
        """Smallest quoted price increment (e.g. 0.00001 for EUR/USD)."""
        return Decimal(1).scaleb(-self.price_decimals)

    @property
    def example_price(self) -> str:
        """A representative quote, used as an input hint."""
        if self.price_decimals == 3:
            return "110.000"
        return "1.10000"


# ── Instrument table ─────────────────────────────────────────────────────

_PIP_STANDARD = Decimal("0.0001")
_PIP_JPY = Decimal("0.01")

_INSTRUMENTS: dict[InstrumentSymbol, Instrument] = {
    InstrumentSymbol.EUR_USD: Instrument(InstrumentSymbol.EUR_USD, _PIP_STANDARD),
    InstrumentSymbol.GBP_USD: Instrument(InstrumentSymbol.GBP_USD, _PIP_STANDARD),
    InstrumentSymbol.USD_JPY: Instrument(
        InstrumentSymbol.USD_JPY, _PIP_JPY, price_decimals=3,
    ),
    InstrumentSymbol.USD_CHF: Instrument(InstrumentSymbol.USD_CHF, _PIP_STANDARD),
    InstrumentSymbol.AUD_USD: Instrument(InstrumentSymbol.AUD_USD, _PIP_STANDARD),
    InstrumentSymbol.USD_CAD: Instrument(InstrumentSymbol.USD_CAD, _PIP_STANDARD),
}

INSTRUMENTS = MappingProxyType(_INSTRUMENTS)


def _normalise_symbol(symbol: str) -> str:
    return symbol.strip().upper().replace("_", "/")


def lookup_instrument(symbol) -> Instrument:
    """Return the ``Instrument`` for *symbol*.

    Accepts an ``InstrumentSymbol`` or text such as ``"EUR/USD"``; the
    broker-style ``"eur_usd"`` form is accepted too.

    Raises:
        UnknownInstrument: If *symbol* is not in the table.
    """
    if isinstance(symbol, InstrumentSymbol):
        return INSTRUMENTS[symbol]
    if not isinstance(symbol, str):
        raise UnknownInstrument(symbol)
    try:
        key = InstrumentSymbol(_normalise_symbol(symbol))
    except ValueError:
        raise UnknownInstrument(symbol) from None
    return INSTRUMENTS[key]


def list_instruments() -> list[Instrument]:
    """Return every supported instrument in table order."""
    return list(INSTRUMENTS.values())
