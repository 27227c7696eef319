from typing import Sequence

import numpy as np

from stock_aggregator.models import CorrelationStrength


def covariance(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Population covariance (divides by N).

    Raises:
        ValueError: If the inputs differ in length or are empty
    """
    if len(xs) != len(ys):
        raise ValueError(f"Datasets must have the same length ({len(xs)} != {len(ys)})")
    if len(xs) == 0:
        raise ValueError("Datasets must not be empty")

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    return float(np.mean((x - x.mean()) * (y - y.mean())))


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Standard linear correlation using population statistics throughout.

    Returns 0.0 instead of failing when the coefficient is undefined:
    mismatched lengths, fewer than two points, or a constant input.
    """
    if len(xs) != len(ys) or len(xs) < 2:
        return 0.0

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)

    # Constant input
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    std_x = x.std()
    std_y = y.std()
    if std_x == 0 or std_y == 0:
        return 0.0

    r = covariance(x, y) / (std_x * std_y)
    if not np.isfinite(r):
        return 0.0
    return float(np.clip(r, -1.0, 1.0))


def correlation_strength(correlation: float) -> CorrelationStrength:
    """Qualitative label for a coefficient, by absolute value."""
    magnitude = abs(correlation)
    if magnitude >= 0.8:
        return CorrelationStrength.VERY_STRONG
    if magnitude >= 0.6:
        return CorrelationStrength.STRONG
    if magnitude >= 0.4:
        return CorrelationStrength.MODERATE
    if magnitude >= 0.2:
        return CorrelationStrength.WEAK
    return CorrelationStrength.VERY_WEAK
