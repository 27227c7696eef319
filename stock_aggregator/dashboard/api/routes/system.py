"""
System API routes.
"""
import time
from fastapi import APIRouter, Depends

from stock_aggregator import __version__
from stock_aggregator.dashboard.api.dependencies import app_state, get_data_service
from stock_aggregator.dashboard.api.models import HealthResponse
from stock_aggregator.data.service import StockDataService
from stock_aggregator.models import CacheStats

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: StockDataService = Depends(get_data_service),
) -> HealthResponse:
    """
    System health check.

    Reports ``degraded`` while synthetic prices are being served.
    """
    uptime = time.time() - app_state.start_time if app_state.start_time else 0

    return HealthResponse(
        status="degraded" if service.using_fallback else "healthy",
        version=__version__,
        uptime_seconds=uptime,
        using_fallback=service.using_fallback,
    )


@router.get("/cache", response_model=CacheStats)
async def cache_stats(
    service: StockDataService = Depends(get_data_service),
) -> CacheStats:
    """Cache size, keys and fallback state."""
    return service.cache_stats()
