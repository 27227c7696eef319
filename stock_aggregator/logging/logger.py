import logging
from typing import Any, Dict

from stock_aggregator.config.settings import Config
from .handlers import setup_handlers


class ServiceLogger:
    """Custom logger with context support"""

    def __init__(self, name: str = "stock_aggregator"):
        self.logger = logging.getLogger(name)
        self.logger.propagate = False # Prevent double logging if root logger is configured
        self._context: Dict[str, Any] = {}
        self._setup_done = False

    def setup(self, config: Config):
        """Setup logging based on config"""
        if self._setup_done:
            return

        self.logger.setLevel(config.log_level)
        self.logger.handlers.clear()
        try:
            setup_handlers(self.logger, config)
        except OSError as e:
            # Unwritable log directory: keep console logging only
            config = config.model_copy(update={"log_file": None})
            self.logger.handlers.clear()
            setup_handlers(self.logger, config)
            self.logger.warning(f"Failed to setup file logging: {e}")

        self._setup_done = True

    def with_context(self, **kwargs) -> "ServiceLogger":
        """Return logger with additional context"""
        new_logger = ServiceLogger.__new__(ServiceLogger)
        new_logger.logger = self.logger
        new_logger._context = {**self._context, **kwargs}
        new_logger._setup_done = self._setup_done
        return new_logger

    def _log(self, level: int, msg: str, **kwargs):
        # Merge context
        context = {**self._context, **kwargs}
        extra = {"context": context} if context else {}
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs):
        self._log(logging.CRITICAL, msg, **kwargs)

    def fallback(self, reason: str, **kwargs):
        """Log a switch to synthetic prices (always logged)"""
        self.warning(f"FALLBACK: {reason}", fallback=True, **kwargs)

# Singleton
logger = ServiceLogger()

def setup_logging(config: Config):
    """Initialize logging"""
    logger.setup(config)
