import logging
import logging.handlers
import os

from .formatters import JSONFormatter, PrettyFormatter
from stock_aggregator.config.settings import Config


def setup_handlers(logger: logging.Logger, config: Config):
    # File Handler (JSON)
    log_file = config.log_file
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10*1024*1024, backupCount=5
        )
        file_handler.setFormatter(JSONFormatter())
        file_handler.setLevel(logging.DEBUG) # Catch all in file
        logger.addHandler(file_handler)

    # Console Handler
    console_handler = logging.StreamHandler()
    if config.env == "production":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(PrettyFormatter())

    console_handler.setLevel(config.log_level)
    logger.addHandler(console_handler)
