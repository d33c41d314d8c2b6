# core/logging_config.py

"""
Structured JSON logging configuration.

Provides channel loggers (store, persistence, cli) whose entries are written as one JSON object
per line to stderr, so that log output never interleaves with the interactive menus on stdout.

The log level is read from the `LOG_LEVEL` environment variable and defaults to WARNING.
"""

import json
import logging
import os
from datetime import datetime, timezone

CHANNELS = ("store", "persistence", "cli")
DEFAULT_LOG_LEVEL = "WARNING"


class StructuredJsonFormatter(logging.Formatter):
    """
    Formats each record as a single JSON object with the keys:
    timestamp, level, message, channel, context, and (when present) exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "message": record.getMessage(),
            "channel": getattr(record, "channel", record.name.split(".")[-1]),
            "context": getattr(record, "context", {}) or {},
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures the `app` logger hierarchy with the JSON formatter.

    Args:
        level (str | None): Overrides `LOG_LEVEL` when provided.

    Returns:
        logging.Logger: The configured `app` parent logger.

    Notes:
        - Calling this more than once replaces the handler rather than stacking a new one.
    """
    level_name = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    log_level = getattr(logging, level_name, logging.WARNING)

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredJsonFormatter())

    app_logger = logging.getLogger("app")
    app_logger.setLevel(log_level)
    app_logger.handlers = [handler]

    for channel in CHANNELS:
        logging.getLogger(f"app.{channel}").setLevel(log_level)

    return app_logger


def get_logger(channel: str) -> logging.Logger:
    return logging.getLogger(f"app.{channel}")


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    context: dict | None = None,
    exc_info: bool = False,
) -> None:
    """
    Emits a log entry carrying business context (student id, storage key, etc.).

    Args:
        logger (logging.Logger): The channel logger to use.
        level (int): A `logging` level constant.
        message (str): Human-readable log message.
        context (dict | None): Structured context attached to the entry.
        exc_info (bool): If True, the active exception is attached.
    """
    logger.log(
        level,
        message,
        exc_info=exc_info,
        extra={"context": context or {}, "channel": logger.name.split(".")[-1]},
    )
