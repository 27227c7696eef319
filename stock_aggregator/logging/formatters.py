import logging
import json
from datetime import datetime

import coloredlogs


class JSONFormatter(logging.Formatter):
    """Formats logs as JSON."""

    def format(self, record):
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields (context)
        if hasattr(record, "context"):
            log_obj.update(record.context)

        # Add exception info
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


class PrettyFormatter(coloredlogs.ColoredFormatter):
    """Coloured console formatter that appends the record context."""

    DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"

    def __init__(self, fmt: str = DEFAULT_FORMAT, datefmt: str = "%H:%M:%S"):
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record):
        msg = super().format(record)
        context = getattr(record, "context", {})
        if context:
            msg += f" | {json.dumps(context, default=str)}"
        return msg
