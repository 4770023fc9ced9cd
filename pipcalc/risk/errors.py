"""Trade calculation errors.

Every error carries a stable ``code`` so callers (CLI, API) can map it to
an exit status or HTTP response without parsing the message.
"""


class TradeCalculationError(ValueError):
    """Base class for every error the calculator reports."""

    code = "trade_calculation_error"


class UnknownInstrument(TradeCalculationError):
    """The pair symbol is not in the instrument table."""

    code = "unknown_instrument"

    def __init__(self, symbol) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown currency pair: {symbol!r}")


class ValidationError(TradeCalculationError):
    """A trade input failed validation."""

    code = "validation_error"


class InvalidDirection(ValidationError):
    code = "invalid_direction"

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"direction must be 'buy' or 'sell', got {value!r}")


class InvalidNumber(ValidationError):
    """A numeric input is missing, malformed, or not finite."""

    code = "invalid_number"

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a finite number, got {value!r}")


class NonPositiveValue(ValidationError):
    """A numeric input is zero or negative."""

    code = "non_positive_value"

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be greater than zero, got {value}")


class InvalidBuyOrdering(ValidationError):
    code = "invalid_buy_ordering"

    def __init__(self) -> None:
        super().__init__(
            "For a buy position, stop loss must be below the entry price "
            "and take profit above it."
        )


class InvalidSellOrdering(ValidationError):
    code = "invalid_sell_ordering"

    def __init__(self) -> None:
        super().__init__(
            "For a sell position, stop loss must be above the entry price "
            "and take profit below it."
        )
