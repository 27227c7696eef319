from .logger import logger, setup_logging, ServiceLogger
from .decorators import log_timing

__all__ = ["logger", "setup_logging", "ServiceLogger", "log_timing"]
