"""PipCalc — application entry point.

Defines the FastAPI internal server and the CLI entry point for one-off
calculations, listing pairs, and serving the API.
"""

import logging
import sys

from fastapi import FastAPI

from pipcalc.api.routers import router

app = FastAPI(title="PipCalc Internal API", version="0.1.0")
app.include_router(router)

logger = logging.getLogger("pipcalc")


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}


# ── CLI ──────────────────────────────────────────────────────────────────


def _build_parser(default_pair: str):
    import argparse

    parser = argparse.ArgumentParser(
        prog="pipcalc",
        description="Forex pip distance and profit/loss calculator",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Evaluate a single position")
    calc.add_argument(
        "--pair",
        default=default_pair,
        help=f"Currency pair, e.g. EUR/USD (default: {default_pair})",
    )
    calc.add_argument(
        "--direction",
        required=True,
        help="Position direction: buy or sell",
    )
    calc.add_argument("--entry", required=True, help="Entry price")
    calc.add_argument("--stop-loss", required=True, help="Stop-loss price")
    calc.add_argument("--take-profit", required=True, help="Take-profit price")
    calc.add_argument("--volume", required=True, help="Trade volume in lots")

    sub.add_parser("pairs", help="List supported currency pairs")

    serve = sub.add_parser("serve", help="Run the internal HTTP API")
    serve.add_argument("--host", help="Bind address (default: API_HOST)")
    serve.add_argument("--port", type=int, help="Bind port (default: API_PORT)")
    return parser


def _run_calc(args) -> int:
    from pipcalc.cli.report import print_error, print_result
    from pipcalc.models.instrument import lookup_instrument
    from pipcalc.risk.errors import TradeCalculationError
    from pipcalc.risk.trade_calculator import evaluate_inputs, parse_direction

    try:
        result = evaluate_inputs(
            instrument_symbol=args.pair,
            direction=args.direction,
            entry_price=args.entry,
            stop_loss=args.stop_loss,
            take_profit=args.take_profit,
            volume_lots=args.volume,
        )
    except TradeCalculationError as exc:
        print_error(exc)
        return 1

    print_result(lookup_instrument(args.pair), parse_direction(args.direction), result)
    return 0


def _run_server(config, host: str | None, port: int | None) -> int:
    import uvicorn

    host = host or config.api_host
    port = port or config.api_port
    logger.info("PipCalc API available at http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=config.log_level.lower())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and dispatch to the requested command.

    Returns the process exit code: 0 on success, 1 when the calculation
    is rejected.
    """
    from pipcalc.cli.report import print_instruments
    from pipcalc.config import load_config
    from pipcalc.models.instrument import list_instruments

    config = load_config()
    args = _build_parser(config.default_pair).parse_args(argv)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "calc":
        return _run_calc(args)
    if args.command == "pairs":
        print_instruments(list_instruments())
        return 0
    return _run_server(config, args.host, args.port)


if __name__ == "__main__":
    sys.exit(main())
