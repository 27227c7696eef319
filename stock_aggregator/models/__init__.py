"""
Data Models Package.
"""

from stock_aggregator.models.price import (
    PricePoint,
    PriceSeries,
    PriceStatistics,
    format_timestamp,
    parse_timestamp,
)
from stock_aggregator.models.correlation import (
    CorrelationMatrix,
    CorrelationStrength,
    CorrelationPair,
)
from stock_aggregator.models.cache import CacheStats

__all__ = [
    # Price
    "PricePoint",
    "PriceSeries",
    "PriceStatistics",
    "format_timestamp",
    "parse_timestamp",

    # Correlation
    "CorrelationMatrix",
    "CorrelationStrength",
    "CorrelationPair",

    # Cache
    "CacheStats",
]
