"""
API response models.
"""
from .responses import (
    RootResponse,
    HealthResponse,
    StockListResponse,
    StockSeriesResponse,
    CorrelationResponse,
)

__all__ = [
    "RootResponse",
    "HealthResponse",
    "StockListResponse",
    "StockSeriesResponse",
    "CorrelationResponse",
]
