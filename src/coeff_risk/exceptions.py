"""Errors raised by the risk engine.

Every subclass of :class:`RiskEngineError` is fatal to the run that raised
it; no partial result is produced.
"""


class RiskEngineError(Exception):
    """Base exception for all risk engine errors."""


class EmptyPortfolio(RiskEngineError):
    def __init__(self) -> None:
        super().__init__("Portfolio has no holdings.")


class PortfolioTooLarge(RiskEngineError):
    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"Portfolio has {count} assets; at most {limit} allowed.")
        self.count = count
        self.limit = limit


class WeightOverflow(RiskEngineError):
    """Raised when portfolio weights add up to more than 100%."""

    def __init__(self, total: float) -> None:
        super().__init__(f"Total allocation cannot exceed 100% (got {total:g}%).")
        self.total = total


class DataUnavailable(RiskEngineError):
    """Raised when a ticker yields no usable daily records."""

    def __init__(self, ticker: str) -> None:
        super().__init__(f"No data for {ticker}")
        self.ticker = ticker


class InsufficientOverlap(RiskEngineError):
    def __init__(self, found: int, required: int) -> None:
        super().__init__(
            f"Insufficient data overlap: {found} common trading days, "
            f"need at least {required}."
        )
        self.found = found
        self.required = required


class DegenerateVolatility(RiskEngineError):
    """Raised when a return series has zero variance and beta is undefined."""

    def __init__(self, series: str) -> None:
        super().__init__(f"{series} returns have zero volatility; beta is undefined.")
        self.series = series


class ConfigurationError(RiskEngineError):
    """Raised when no usable price source is configured."""
