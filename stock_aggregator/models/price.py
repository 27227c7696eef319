from datetime import datetime, timezone
from typing import List

import pandas as pd
from pydantic import BaseModel, ConfigDict

def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a ``Z`` suffix, as the upstream emits"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def parse_timestamp(value: str) -> pd.Timestamp:
    """UTC instant of an ISO-8601 timestamp; raises ValueError if unparseable"""
    return pd.to_datetime(value, utc=True)

class PricePoint(BaseModel):
    """Point-in-time price sample"""
    model_config = ConfigDict(frozen=True)

    price: float
    timestamp: str  # ISO-8601, exact join key for alignment

# Ordered oldest to newest, as returned by the source
PriceSeries = List[PricePoint]

class PriceStatistics(BaseModel):
    """Descriptive statistics of one price series"""

    mean: float = 0.0
    std_dev: float = 0.0
    min: float = 0.0
    max: float = 0.0
    latest: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0
