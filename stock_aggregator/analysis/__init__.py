"""
Descriptive statistics for a single price series.
"""
from .statistics import mean, std_dev, compute_statistics

__all__ = ["mean", "std_dev", "compute_statistics"]
