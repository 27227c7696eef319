"""
Dashboard API module.
"""
from .main import app
from .dependencies import (
    app_state,
    get_config,
    get_data_service,
    get_correlation_engine,
)

__all__ = [
    "app",
    "app_state",
    "get_config",
    "get_data_service",
    "get_correlation_engine",
]
