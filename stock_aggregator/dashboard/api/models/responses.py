"""
Response models for the dashboard API.
"""
from typing import Dict, List
from pydantic import BaseModel, Field

from stock_aggregator.models import CorrelationPair, PricePoint, PriceStatistics


class RootResponse(BaseModel):
    name: str
    version: str
    docs: str = "/docs"


class HealthResponse(BaseModel):
    """System health status."""
    status: str = Field(..., description="healthy or degraded")
    version: str
    uptime_seconds: float
    using_fallback: bool


class StockListResponse(BaseModel):
    symbols: List[str]
    using_fallback: bool


class StockSeriesResponse(BaseModel):
    """Price window and summary statistics for one symbol."""
    symbol: str
    minutes: int
    prices: List[PricePoint]
    statistics: PriceStatistics


class CorrelationResponse(BaseModel):
    """Correlation matrix plus its labelled upper triangle."""
    symbols: List[str]
    minutes: int
    matrix: Dict[str, Dict[str, float]]
    pairs: List[CorrelationPair]
