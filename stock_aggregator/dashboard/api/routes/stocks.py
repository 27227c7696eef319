"""
Stock API routes: symbol universe and single-symbol price windows.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from stock_aggregator.analysis.statistics import compute_statistics
from stock_aggregator.config.settings import Config
from stock_aggregator.dashboard.api.dependencies import get_config, get_data_service
from stock_aggregator.dashboard.api.models import StockListResponse, StockSeriesResponse
from stock_aggregator.data.service import StockDataService

router = APIRouter(prefix="/api/stocks", tags=["Stocks"])


@router.get("", response_model=StockListResponse)
async def list_stocks(
    service: StockDataService = Depends(get_data_service),
) -> StockListResponse:
    """
    Get the tradable symbols.

    Served from the synthetic universe when the upstream is unavailable.
    """
    symbols = await service.get_symbol_list()
    return StockListResponse(symbols=symbols, using_fallback=service.using_fallback)


@router.get("/{symbol}", response_model=StockSeriesResponse)
async def get_stock(
    symbol: str = Path(..., min_length=1, max_length=16, description="Ticker symbol"),
    minutes: Optional[int] = Query(None, ge=1, le=1440, description="Window length in minutes"),
    service: StockDataService = Depends(get_data_service),
    config: Config = Depends(get_config),
) -> StockSeriesResponse:
    """
    Get recent prices and summary statistics for one symbol.

    - **symbol**: Ticker, case-insensitive
    - **minutes**: Number of one-minute samples requested (defaults to the chart window)
    """
    symbol = symbol.upper()
    if minutes is None:
        minutes = config.chart_window_minutes

    prices = await service.get_series(symbol, minutes)
    return StockSeriesResponse(
        symbol=symbol,
        minutes=minutes,
        prices=prices,
        statistics=compute_statistics(prices),
    )
