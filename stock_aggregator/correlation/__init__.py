"""
Correlation engine: timestamp alignment, Pearson coefficient and matrices.
"""
from .timeseries import align_time_series, to_prices
from .methods import covariance, pearson_correlation, correlation_strength
from .matrix import (
    pair_correlation,
    build_correlation_matrix,
    correlation_pairs,
    CorrelationEngine,
)

__all__ = [
    "align_time_series",
    "to_prices",
    "covariance",
    "pearson_correlation",
    "correlation_strength",
    "pair_correlation",
    "build_correlation_matrix",
    "correlation_pairs",
    "CorrelationEngine",
]
