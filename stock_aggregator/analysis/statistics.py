"""
Statistics helper for the single-symbol view.

Pure functions; every value is recomputed from the series passed in.
Empty input yields zeros rather than NaN.
"""
from typing import Sequence, Union

import numpy as np

from stock_aggregator.models import PricePoint, PriceStatistics


def mean(xs: Sequence[float]) -> float:
    if len(xs) == 0:
        return 0.0
    return float(np.mean(np.asarray(xs, dtype=float)))


def std_dev(xs: Sequence[float]) -> float:
    """Population standard deviation (divides by N)."""
    if len(xs) == 0:
        return 0.0
    return float(np.std(np.asarray(xs, dtype=float)))


def _as_prices(values: Sequence[Union[PricePoint, float]]) -> np.ndarray:
    return np.array(
        [v.price if isinstance(v, PricePoint) else v for v in values],
        dtype=float,
    )


def compute_statistics(values: Sequence[Union[PricePoint, float]]) -> PriceStatistics:
    """
    Summarize a series: mean, std-dev, range, latest and change since first.

    ``change`` and ``change_percent`` are 0 with fewer than two points;
    ``change_percent`` is also 0 when the first price is 0.
    """
    prices = _as_prices(values)
    if prices.size == 0:
        return PriceStatistics()

    first = float(prices[0])
    latest = float(prices[-1])
    change = latest - first if prices.size > 1 else 0.0
    change_percent = change / first * 100 if prices.size > 1 and first != 0 else 0.0

    return PriceStatistics(
        mean=mean(prices),
        std_dev=std_dev(prices),
        min=float(prices.min()),
        max=float(prices.max()),
        latest=latest,
        change=change,
        change_percent=change_percent,
    )
