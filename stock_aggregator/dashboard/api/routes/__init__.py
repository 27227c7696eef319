"""
API routes module.
"""
from .stocks import router as stocks_router
from .correlation import router as correlation_router
from .system import router as system_router

__all__ = [
    "stocks_router",
    "correlation_router",
    "system_router",
]
