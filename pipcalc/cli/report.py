"""CLI report — prints calculation results to the console."""

from pipcalc.models.instrument import Instrument
from pipcalc.models.trade import Direction, TradeResult
from pipcalc.risk.errors import TradeCalculationError


def format_money(amount) -> str:
    """Render a money amount with thousands separators, e.g. ``-5,000.00``."""
    return f"{amount:,.2f}"


def print_result(
    instrument: Instrument,
    direction: Direction,
    result: TradeResult,
) -> str:
    """Format and print a ``TradeResult``.

    Returns:
        The formatted string (also printed to stdout).
    """
    lines = [
        "──────────────── Trade Calculation ────────────────",
        f"  Pair:              {instrument.symbol.value}",
        f"  Direction:         {direction.value}",
        f"  Units:             {result.units:,.0f}",
        f"  Stop Loss:         {result.stop_loss_pips} pips",
        f"  Take Profit:       {result.take_profit_pips} pips",
        f"  Potential Loss:    {format_money(result.potential_loss)}",
        f"  Potential Profit:  {format_money(result.potential_profit)}",
        f"  Risk:Reward:       1:{result.risk_reward_ratio}",
        "───────────────────────────────────────────────────",
    ]
    output = "\n".join(lines)
    print(output)
    return output


def print_error(error: TradeCalculationError) -> str:
    """Print a one-line error message tagged with the error code."""
    output = f"Error [{error.code}]: {error}"
    print(output)
    return output


def print_instruments(instruments: list[Instrument]) -> str:
    """Print the instrument table, one pair per line."""
    lines = [f"  {'Pair':<9}{'Pip size':>10}{'Lot units':>12}{'Decimals':>10}"]
    for inst in instruments:
        lines.append(
            f"  {inst.symbol.value:<9}{str(inst.pip_size):>10}"
            f"{inst.standard_lot_units:>12,}{inst.price_decimals:>10}"
        )
    output = "\n".join(lines)
    print(output)
    return output
