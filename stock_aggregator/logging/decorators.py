import time
import functools
import asyncio
from typing import Callable, Optional

from .logger import logger


def _report(name: str, start: float, slow_ms: Optional[float], error: Optional[BaseException] = None):
    duration = round((time.perf_counter() - start) * 1000, 2)
    if error is not None:
        logger.error(f"{name} failed", duration_ms=duration, error=str(error))
    elif slow_ms is not None and duration >= slow_ms:
        logger.warning(f"{name} slow", duration_ms=duration, threshold_ms=slow_ms)
    else:
        logger.debug(f"{name} completed", duration_ms=duration)


def log_timing(func: Optional[Callable] = None, *, slow_ms: Optional[float] = None):
    """
    Decorator to log function execution time.

    Works on plain and async callables, bare (``@log_timing``) or with a
    threshold (``@log_timing(slow_ms=500)``) above which completions are
    logged as warnings instead of debug lines.
    """
    def decorate(fn: Callable):
        name = fn.__qualname__

        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await fn(*args, **kwargs)
            except Exception as e:
                _report(name, start, slow_ms, e)
                raise
            _report(name, start, slow_ms)
            return result

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = fn(*args, **kwargs)
            except Exception as e:
                _report(name, start, slow_ms, e)
                raise
            _report(name, start, slow_ms)
            return result

        if asyncio.iscoroutinefunction(fn):
            return async_wrapper
        return sync_wrapper

    if func is not None:
        return decorate(func)
    return decorate
