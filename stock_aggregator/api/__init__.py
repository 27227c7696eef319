"""
Upstream Price Source Package.

This package provides the async client for the stock price REST API and the
exception hierarchy it raises.

Example:
    from stock_aggregator.api import StockPriceClient

    async with StockPriceClient(token=token) as client:
        symbols = await client.list_symbols()
        prices = await client.fetch_series("AAPL", minutes=50)
"""

from stock_aggregator.api.client import StockPriceClient
from stock_aggregator.api.exceptions import (
    StockAggregatorError,
    PriceSourceError,
    PriceSourceAPIError,
    AuthenticationError,
    SymbolNotFoundError,
    RateLimitError,
    PriceSourceUnavailableError,
    InvalidResponseError,
    ConfigurationError,
)

__all__ = [
    # Client
    "StockPriceClient",
    # Exceptions
    "StockAggregatorError",
    "PriceSourceError",
    "PriceSourceAPIError",
    "AuthenticationError",
    "SymbolNotFoundError",
    "RateLimitError",
    "PriceSourceUnavailableError",
    "InvalidResponseError",
    "ConfigurationError",
]
