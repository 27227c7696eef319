from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from stock_aggregator.models import PricePoint, parse_timestamp


def _instant(point: PricePoint) -> pd.Timestamp:
    return parse_timestamp(point.timestamp)


def align_time_series(
    series_a: Sequence[PricePoint],
    series_b: Sequence[PricePoint],
) -> Tuple[List[PricePoint], List[PricePoint]]:
    """
    Restrict two series to the timestamps they share.

    Matching is exact on the timestamp string, not nearest-neighbour.
    Both outputs are sorted oldest first; disjoint inputs give two empty
    lists.
    """
    common = {p.timestamp for p in series_a} & {p.timestamp for p in series_b}
    if not common:
        return [], []

    aligned_a = sorted((p for p in series_a if p.timestamp in common), key=_instant)
    aligned_b = sorted((p for p in series_b if p.timestamp in common), key=_instant)
    return aligned_a, aligned_b


def to_prices(series: Sequence[PricePoint]) -> np.ndarray:
    """Price column of a series as a float array."""
    return np.array([p.price for p in series], dtype=float)

