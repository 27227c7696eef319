"""
Correlation API routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from stock_aggregator.correlation.matrix import CorrelationEngine, correlation_pairs
from stock_aggregator.dashboard.api.dependencies import get_correlation_engine
from stock_aggregator.dashboard.api.models import CorrelationResponse

router = APIRouter(prefix="/api/correlation", tags=["Correlation"])


@router.get("", response_model=CorrelationResponse)
async def get_correlation_matrix(
    symbols: List[str] = Query(..., description="Symbols to correlate (repeat the parameter)"),
    minutes: Optional[int] = Query(None, ge=2, le=1440, description="Window length in minutes"),
    engine: CorrelationEngine = Depends(get_correlation_engine),
) -> CorrelationResponse:
    """
    Pearson correlation matrix over aligned price windows.

    - **symbols**: At least two distinct tickers
    - **minutes**: Number of one-minute samples per symbol (defaults to the correlation window)
    """
    ordered = list(dict.fromkeys(s.upper() for s in symbols))
    if len(ordered) < 2:
        raise HTTPException(status_code=400, detail="At least two distinct symbols are required")

    if minutes is None:
        minutes = engine.window_minutes

    matrix = await engine.compute_matrix(ordered, minutes)
    return CorrelationResponse(
        symbols=ordered,
        minutes=minutes,
        matrix=matrix,
        pairs=correlation_pairs(matrix, ordered),
    )
