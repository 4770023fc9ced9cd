"""PipCalc — application configuration.

Loads .env variables into a typed config object.
No variable is required; every field has a default.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from pipcalc.models.instrument import lookup_instrument
from pipcalc.risk.errors import UnknownInstrument


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Typed configuration loaded from environment variables."""

    default_pair: str
    log_level: str
    api_host: str
    api_port: int


def load_config(env_path: str | None = None) -> Config:
    """Load configuration from environment variables.

    Raises ``ValueError`` naming the variable when ``DEFAULT_PAIR`` is not a
    supported currency pair, ``LOG_LEVEL`` is not a standard logging level,
    or ``API_PORT`` is not an integer.
    """
    load_dotenv(dotenv_path=env_path)

    pair = os.environ.get("DEFAULT_PAIR", "EUR/USD")
    try:
        default_pair = lookup_instrument(pair).symbol.value
    except UnknownInstrument:
        raise ValueError(
            f"DEFAULT_PAIR is not a supported currency pair: {pair!r}"
        ) from None

    port = os.environ.get("API_PORT", "8080")
    try:
        api_port = int(port)
    except ValueError:
        raise ValueError(f"API_PORT must be an integer, got {port!r}") from None

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )

    return Config(
        default_pair=default_pair,
        log_level=log_level,
        api_host=os.environ.get("API_HOST", "127.0.0.1"),
        api_port=api_port,
    )
