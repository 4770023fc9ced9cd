"""Internal API routers — /instruments and /calculate endpoints.

No business logic. Delegates to the instrument table and trade calculator
and renders their output as JSON.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from pipcalc.models.instrument import Instrument, list_instruments, lookup_instrument
from pipcalc.models.trade import TradeResult
from pipcalc.risk.errors import TradeCalculationError, UnknownInstrument
from pipcalc.risk.trade_calculator import evaluate_inputs

router = APIRouter()


# ── Serialisation ────────────────────────────────────────────────────────


def instrument_to_dict(inst: Instrument) -> dict:
    return {
        "pair": inst.symbol.value,
        "base_currency": inst.base_currency,
        "counter_currency": inst.counter_currency,
        "pip_size": str(inst.pip_size),
        "standard_lot_units": inst.standard_lot_units,
        "price_decimals": inst.price_decimals,
        "price_step": str(inst.price_step),
        "example_price": inst.example_price,
    }


def result_to_dict(result: TradeResult) -> dict:
    """Render a ``TradeResult`` with fixed-precision string values."""
    return {
        "stop_loss_pips": f"{result.stop_loss_pips:.1f}",
        "take_profit_pips": f"{result.take_profit_pips:.1f}",
        "potential_loss": f"{result.potential_loss:.2f}",
        "potential_profit": f"{result.potential_profit:.2f}",
        "units": format(result.units.normalize(), "f"),
        "risk_reward_ratio": f"{result.risk_reward_ratio:.2f}",
    }


def _error_response(exc: TradeCalculationError) -> JSONResponse:
    status_code = 404 if isinstance(exc, UnknownInstrument) else 422
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "error": exc.code, "message": str(exc)},
    )


# ── Instruments ──────────────────────────────────────────────────────────


@router.get("/instruments")
async def get_instruments():
    """Return every supported currency pair."""
    return {"instruments": [instrument_to_dict(i) for i in list_instruments()]}


@router.get("/instruments/{pair}")
async def get_instrument(pair: str):
    """Return one pair, addressed in underscore form (e.g. ``USD_JPY``)."""
    try:
        inst = lookup_instrument(pair)
    except UnknownInstrument as exc:
        return _error_response(exc)
    return instrument_to_dict(inst)


# ── Calculation ──────────────────────────────────────────────────────────


@router.post("/calculate")
async def post_calculate(body: dict):
    """Evaluate a position.

    Body keys: ``pair``, ``direction``, ``entry_price``, ``stop_loss``,
    ``take_profit``, ``volume``.  Prices and volume may be strings or numbers.
    """
    try:
        result = evaluate_inputs(
            instrument_symbol=body.get("pair"),
            direction=body.get("direction"),
            entry_price=body.get("entry_price"),
            stop_loss=body.get("stop_loss"),
            take_profit=body.get("take_profit"),
            volume_lots=body.get("volume"),
        )
    except TradeCalculationError as exc:
        return _error_response(exc)
    return {"status": "ok", "result": result_to_dict(result)}
