"""
Price data sourcing: TTL cache, synthetic fallback and the cached service.
"""
from stock_aggregator.data.cache import TTLCache, CacheEntry
from stock_aggregator.data.synthetic import (
    SyntheticPriceGenerator,
    DEFAULT_SYMBOLS,
    BASE_PRICES,
)
from stock_aggregator.data.service import StockDataService, FetchOutcome

__all__ = [
    "TTLCache",
    "CacheEntry",
    "SyntheticPriceGenerator",
    "DEFAULT_SYMBOLS",
    "BASE_PRICES",
    "StockDataService",
    "FetchOutcome",
]
