"""
Dependency injection for API routes.
"""
import time
from typing import Optional

from stock_aggregator.config.settings import Config
from stock_aggregator.correlation.matrix import CorrelationEngine
from stock_aggregator.data.service import StockDataService


class AppState:
    """
    Application state container.

    Holds the one data service instance shared by every route, so the
    cache and the fallback flag are shared too.
    """

    def __init__(self):
        self.config: Optional[Config] = None
        self.data_service: Optional[StockDataService] = None
        self.correlation_engine: Optional[CorrelationEngine] = None
        self.start_time: float = 0

    def initialize(self, config: Config, data_service: Optional[StockDataService] = None):
        """Initialize with configuration."""
        self.config = config
        self.start_time = time.time()
        self.data_service = data_service or StockDataService.from_config(config)
        self.correlation_engine = CorrelationEngine(
            self.data_service,
            window_minutes=config.correlation_window_minutes,
        )

    def reset(self):
        self.__init__()


# Global app state
app_state = AppState()


def get_config() -> Config:
    """Get application configuration."""
    if app_state.config is None:
        app_state.config = Config()
    return app_state.config


def get_data_service() -> StockDataService:
    """Get the shared stock data service."""
    if app_state.data_service is None:
        app_state.initialize(get_config())
    return app_state.data_service


def get_correlation_engine() -> CorrelationEngine:
    """Get the correlation engine bound to the shared data service."""
    if app_state.correlation_engine is None:
        app_state.initialize(get_config(), get_data_service())
    return app_state.correlation_engine
