"""
Logging setup for applications embedding jwt-util.

The library itself only logs through module loggers
(``logging.getLogger(__name__)``) with structured ``extra={...}`` fields and
never installs handlers on import. Applications that want the same output
format as the rest of the stack call :func:`configure_logging` once at
startup.

Environment Variables:
    LOG_LEVEL: Root log level (default: "INFO")
    LOG_JSON: "false" switches to plain text output
    TESTING: Set to "true" to force plain text output under pytest
"""

import logging
import os
from typing import Any

from pythonjsonlogger import jsonlogger

from jwt_util.core.config import settings

# Reserved log record attributes that should not be treated as extra fields
RESERVED_LOG_ATTRS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
})

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that flattens ``extra`` fields into the log record.

    Output example:
        {"timestamp": "2025-01-15T10:30:00Z", "level": "WARNING",
         "logger": "jwt_util.services.token_inspector",
         "message": "Unable to parse JWT without verification",
         "error": "Not enough segments"}
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(
            *args,
            **kwargs,
            timestamp=True,
        )

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add level, logger name and extra fields to the JSON log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        for key, value in record.__dict__.items():
            if key not in RESERVED_LOG_ATTRS and not key.startswith('_'):
                if key not in log_record:
                    log_record[key] = value


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure root logging for the host application.

    Args:
        level: Log level name (uses LOG_LEVEL if not provided)
        json_output: Emit JSON lines (uses LOG_JSON if not provided)
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.LOG_JSON
    if os.getenv("TESTING", "false").lower() == "true":
        json_output = False

    if not json_output:
        logging.basicConfig(
            level=level,
            format=TEXT_LOG_FORMAT,
            force=True
        )
        return

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(StructuredJsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
