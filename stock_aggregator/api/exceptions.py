"""
Custom exceptions for the stock price aggregator.

Provides a hierarchy of exceptions for failures talking to the upstream
price service. The data service treats every ``PriceSourceError`` the same
way (fall back to synthetic prices); the subclasses exist so the failure
can be logged precisely.
"""

from typing import Optional


class StockAggregatorError(Exception):
    """
    Base exception for all aggregator errors.

    All other exceptions inherit from this class, making it easy
    to catch any aggregator-related error.
    """
    pass


class PriceSourceError(StockAggregatorError):
    """
    Exception raised when the upstream price service cannot be used.

    Attributes:
        status: HTTP status code, if a response was received
    """

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class PriceSourceAPIError(PriceSourceError):
    """
    Exception raised for non-success responses from the price service.

    Attributes:
        status: HTTP status code
        message: Response body or error message
    """

    def __init__(self, status: int, message: str):
        self.message = message
        super().__init__(f"API Error {status}: {message}", status=status)


class AuthenticationError(PriceSourceAPIError):
    """
    Exception raised when the bearer credential is rejected (401/403).
    """
    pass


class SymbolNotFoundError(PriceSourceAPIError):
    """Exception raised when the service does not know a symbol (404)."""

    def __init__(self, symbol: str):
        super().__init__(404, f"Symbol not found: {symbol}")
        self.symbol = symbol


class RateLimitError(PriceSourceAPIError):
    """
    Exception raised when API rate limits are hit.

    Check the retry_after attribute for the server's recommended wait time.
    """

    def __init__(
        self,
        status: int = 429,
        message: str = "Rate limit exceeded",
        retry_after: Optional[float] = None
    ):
        super().__init__(status, message)
        self.retry_after = retry_after


class PriceSourceUnavailableError(PriceSourceError):
    """
    Exception raised for transport failures.

    This includes connection refused, DNS errors and timeouts.
    """
    pass


class InvalidResponseError(PriceSourceError):
    """Exception raised when a response body does not have the expected shape."""
    pass


class ConfigurationError(StockAggregatorError):
    """
    Exception raised for configuration-related errors.

    This includes missing environment variables, invalid config values, etc.
    """
    pass
