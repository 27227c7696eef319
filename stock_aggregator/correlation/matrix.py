"""
Pairwise correlation matrix over a set of symbols.
"""
import logging
from typing import Dict, List, Optional, Sequence

from stock_aggregator.data.service import StockDataService
from stock_aggregator.logging import log_timing
from stock_aggregator.models import CorrelationMatrix, CorrelationPair, PricePoint
from .methods import pearson_correlation, correlation_strength
from .timeseries import align_time_series, to_prices

logger = logging.getLogger(__name__)


def pair_correlation(series_a: Sequence[PricePoint], series_b: Sequence[PricePoint]) -> float:
    """Align two series on shared timestamps and correlate their prices."""
    if not series_a or not series_b:
        return 0.0
    aligned_a, aligned_b = align_time_series(series_a, series_b)
    return pearson_correlation(to_prices(aligned_a), to_prices(aligned_b))


def build_correlation_matrix(
    symbols: Sequence[str],
    series_by_symbol: Dict[str, Sequence[PricePoint]],
) -> CorrelationMatrix:
    """
    Build a full symmetric correlation matrix.

    The diagonal is exactly 1.0. Each unordered pair is computed once and
    mirrored. A symbol with no (or an empty) series correlates 0.0 with
    every other symbol. Repeated symbols are collapsed.
    """
    ordered = list(dict.fromkeys(symbols))
    matrix: CorrelationMatrix = {symbol: {} for symbol in ordered}

    for i, symbol_a in enumerate(ordered):
        matrix[symbol_a][symbol_a] = 1.0
        for symbol_b in ordered[i + 1:]:
            value = pair_correlation(
                series_by_symbol.get(symbol_a) or [],
                series_by_symbol.get(symbol_b) or [],
            )
            matrix[symbol_a][symbol_b] = value
            matrix[symbol_b][symbol_a] = value

    return matrix


def correlation_pairs(matrix: CorrelationMatrix, symbols: Optional[Sequence[str]] = None) -> List[CorrelationPair]:
    """Flatten the upper triangle of a matrix into labelled pairs."""
    ordered = list(dict.fromkeys(symbols if symbols is not None else matrix.keys()))
    pairs = []
    for i, symbol_a in enumerate(ordered):
        for symbol_b in ordered[i + 1:]:
            value = matrix[symbol_a][symbol_b]
            pairs.append(CorrelationPair(
                symbol_a=symbol_a,
                symbol_b=symbol_b,
                correlation=value,
                strength=correlation_strength(value),
            ))
    return pairs


class CorrelationEngine:
    """Fetches price windows through the data service and correlates them."""

    DEFAULT_WINDOW_MINUTES = 100

    def __init__(self, data_service: StockDataService, window_minutes: int = DEFAULT_WINDOW_MINUTES):
        self.data_service = data_service
        self.window_minutes = window_minutes

    @log_timing
    async def compute_matrix(self, symbols: Sequence[str], minutes: Optional[int] = None) -> CorrelationMatrix:
        if minutes is None:
            minutes = self.window_minutes
        ordered = list(dict.fromkeys(symbols))
        series_by_symbol = await self.data_service.get_many_series(ordered, minutes)

        missing = [s for s in ordered if s not in series_by_symbol]
        if missing:
            logger.warning(f"No price data for {missing}, correlating them as 0")

        return build_correlation_matrix(ordered, series_by_symbol)
