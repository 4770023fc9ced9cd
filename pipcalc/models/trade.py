"""Trade data models — typed inputs and outputs of the calculator."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pipcalc.models.instrument import Instrument


class Direction(str, Enum):
    """Position direction."""

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class TradeRequest:
    """A single position to evaluate."""

    instrument: Instrument
    direction: Direction
    entry_price: Decimal
    stop_loss: Decimal
    take_profit: Decimal
    volume_lots: Decimal


@dataclass(frozen=True)
class TradeResult:
    """Pip distances and money outcome of a position.

    ``potential_loss`` is reported as a negative (or zero) amount,
    ``potential_profit`` as a positive (or zero) amount.
    """

    stop_loss_pips: Decimal
    take_profit_pips: Decimal
    potential_loss: Decimal
    potential_profit: Decimal
    units: Decimal
    risk_reward_ratio: Decimal
