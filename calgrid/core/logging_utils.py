import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from calgrid.core.config import settings

_PREFIX = "calgrid."


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per record.
    Useful when calgrid runs inside a pipeline that collects logs.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via logger.debug(..., extra={"extra_data": {...}})
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)  # type: ignore

        return json.dumps(log_obj)


class ConsoleFormatter(logging.Formatter):
    format_str = "%(levelname)-8s | %(asctime)s | %(name)20s:%(lineno)-4d | %(message)s"

    def format(self, record: logging.LogRecord) -> str:
        original_name = record.name
        if original_name == "calgrid":
            record.name = "app"
        elif original_name.startswith(_PREFIX):
            record.name = original_name[len(_PREFIX) :]

        formatter = logging.Formatter(self.format_str, datefmt="%Y-%m-%d %H:%M:%S")
        formatted_message = formatter.format(record)

        # Other handlers may see the same record
        record.name = original_name

        return formatted_message


def setup_logging(level: str | None = None) -> None:
    """
    Configures the logging system for the command line.
    Log records go to stderr so stdout only carries the calendar.
    """
    level = (level or settings.LOG_LEVEL).upper()
    formatter_cls = (
        "calgrid.core.logging_utils.JSONFormatter"
        if settings.LOG_FORMAT == "json"
        else "calgrid.core.logging_utils.ConsoleFormatter"
    )

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": formatter_cls,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "": {"handlers": ["default"], "level": "WARNING"},
            "calgrid": {
                "handlers": ["default"],
                "level": level,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)
