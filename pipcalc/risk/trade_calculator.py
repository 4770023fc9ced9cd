"""Trade calculator — pure math, no I/O.

Validates a position and computes its stop-loss / take-profit distances in
pips and the money lost or gained at each level.

All arithmetic is done in ``Decimal`` so that prices such as ``1.09500``
are exact; values are rounded only when the ``TradeResult`` is built:

    pips   → 1 fractional digit
    money  → 2 fractional digits
    R:R    → 2 fractional digits

Rounding is half away from zero (``ROUND_HALF_UP``).
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from pipcalc.models.instrument import lookup_instrument
from pipcalc.models.trade import Direction, TradeRequest, TradeResult
from pipcalc.risk.errors import (
    InvalidBuyOrdering,
    InvalidDirection,
    InvalidNumber,
    InvalidSellOrdering,
    NonPositiveValue,
    ValidationError,
)

logger = logging.getLogger("pipcalc")

_PIPS_QUANTUM = Decimal("0.1")
_MONEY_QUANTUM = Decimal("0.01")
_RATIO_QUANTUM = Decimal("0.01")

# Inputs outside 1E-100 .. 1E+100 (by magnitude) are rejected at parse time.
MAX_EXPONENT = 100


# ── Parsing ──────────────────────────────────────────────────────────────


def parse_number(field: str, value) -> Decimal:
    """Convert a user-supplied value to a finite ``Decimal``.

    Accepts ``str``, ``int``, ``float`` and ``Decimal``.  Floats go through
    their shortest ``repr`` so ``1.1`` becomes ``Decimal("1.1")`` rather
    than its binary expansion.

    Raises:
        InvalidNumber: If *value* is missing, a bool, unparseable text,
            NaN, infinite, or outside the supported magnitude range
            (exponent beyond +/-MAX_EXPONENT).
    """
    if value is None or isinstance(value, bool):
        raise InvalidNumber(field, value)

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidNumber(field, value) from None
    else:
        raise InvalidNumber(field, value)

    if not number.is_finite():
        raise InvalidNumber(field, value)
    if not number.is_zero() and abs(number.adjusted()) > MAX_EXPONENT:
        raise InvalidNumber(field, value)
    return number


def parse_direction(value) -> Direction:
    """Return the ``Direction`` for ``"buy"`` / ``"sell"`` (any case)."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            pass
    raise InvalidDirection(value)


# ── Validation ───────────────────────────────────────────────────────────


def _check_positive(request: TradeRequest) -> None:
    for field in ("entry_price", "stop_loss", "take_profit", "volume_lots"):
        value = getattr(request, field)
        if value <= 0:
            raise NonPositiveValue(field, value)


def _check_ordering(request: TradeRequest) -> None:
    entry = request.entry_price
    sl = request.stop_loss
    tp = request.take_profit

    if request.direction is Direction.BUY:
        if not (sl < entry < tp):
            raise InvalidBuyOrdering()
    elif not (tp < entry < sl):
        raise InvalidSellOrdering()


def validate(request: TradeRequest) -> None:
    """Raise the first ``ValidationError`` *request* violates, if any."""
    _check_positive(request)
    _check_ordering(request)


# ── Calculation ──────────────────────────────────────────────────────────


def _round(value: Decimal, quantum: Decimal) -> Decimal:
    with localcontext() as ctx:
        # Widen precision so large amounts never overflow the quantize.
        ctx.prec = max(ctx.prec, value.adjusted() - quantum.as_tuple().exponent + 1)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def evaluate(request: TradeRequest) -> TradeResult:
    """Validate *request* and compute its ``TradeResult``.

    Raises:
        ValidationError: The first rule the request violates.
    """
    try:
        validate(request)
    except ValidationError as exc:
        logger.info(
            "Rejected %s %s: %s",
            request.direction.value, request.instrument.symbol.value, exc,
        )
        raise

    instrument = request.instrument
    pip_size = instrument.pip_size
    entry = request.entry_price

    if request.direction is Direction.BUY:
        loss_distance = entry - request.stop_loss
        profit_distance = request.take_profit - entry
    else:
        loss_distance = request.stop_loss - entry
        profit_distance = entry - request.take_profit

    units = request.volume_lots * instrument.standard_lot_units
    raw_loss = loss_distance * units
    raw_profit = profit_distance * units

    potential_loss = _round(-raw_loss, _MONEY_QUANTUM)
    if potential_loss.is_zero():
        potential_loss = potential_loss.copy_abs()

    result = TradeResult(
        stop_loss_pips=_round(abs(entry - request.stop_loss) / pip_size, _PIPS_QUANTUM),
        take_profit_pips=_round(abs(request.take_profit - entry) / pip_size, _PIPS_QUANTUM),
        potential_loss=potential_loss,
        potential_profit=_round(raw_profit, _MONEY_QUANTUM),
        units=units,
        risk_reward_ratio=_round(profit_distance / loss_distance, _RATIO_QUANTUM),
    )
    logger.debug(
        "Evaluated %s %s %s lots: SL %s pips, TP %s pips, loss %s, profit %s",
        request.direction.value, instrument.symbol.value, request.volume_lots,
        result.stop_loss_pips, result.take_profit_pips,
        result.potential_loss, result.potential_profit,
    )
    return result


def evaluate_inputs(
    instrument_symbol,
    direction,
    entry_price,
    stop_loss,
    take_profit,
    volume_lots,
) -> TradeResult:
    """Evaluate a position from raw user input.

    Checks run in a fixed order and stop at the first failure: instrument,
    direction, number parsing, positivity, then directional ordering.

    Args:
        instrument_symbol: Pair such as ``"EUR/USD"``.
        direction: ``"buy"`` or ``"sell"``.
        entry_price: Entry price (text or number).
        stop_loss: Stop-loss price (text or number).
        take_profit: Take-profit price (text or number).
        volume_lots: Trade volume in lots (text or number).

    Returns:
        The computed ``TradeResult``.

    Raises:
        UnknownInstrument: If the pair is not supported.
        ValidationError: The first input rule that fails.
    """
    instrument = lookup_instrument(instrument_symbol)
    request = TradeRequest(
        instrument=instrument,
        direction=parse_direction(direction),
        entry_price=parse_number("entry_price", entry_price),
        stop_loss=parse_number("stop_loss", stop_loss),
        take_profit=parse_number("take_profit", take_profit),
        volume_lots=parse_number("volume_lots", volume_lots),
    )
    return evaluate(request)
