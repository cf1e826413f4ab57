# core/logging_config.py

"""
Structured JSON logging for the student ledger.

Log entries are written as one JSON object per line to stderr, so they never
interleave with the menu text the CLI prints to stdout. Each entry carries a
channel (storage, roster, report, identity) plus optional business context
such as the student id involved.
"""

import json
import logging
import os
from datetime import datetime, timezone

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGER_NAMESPACE = "ledger"
CHANNELS = ("storage", "roster", "report", "identity")


class StructuredJsonFormatter(logging.Formatter):
    """
    Formats each record as a JSON object with the keys
    timestamp, level, message, channel, context and extra.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[
                :-3
            ]
            + "Z",
            "level": record.levelname,
            "message": record.getMessage(),
            "channel": getattr(record, "channel", record.name.split(".")[-1]),
            "context": getattr(record, "context", {}) or {},
            "extra": getattr(record, "extra_data", {}) or {},
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configures the ledger logger hierarchy with the structured JSON formatter.

    Args:
        level (str): A logging level name. Defaults to the `LOG_LEVEL` environment variable, or INFO.

    Returns:
        The configured top-level `ledger` logger.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredJsonFormatter())

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]
    root_logger.propagate = False

    # channel loggers share the root handler; names keep entries filterable
    for channel in CHANNELS:
        get_logger(channel).setLevel(log_level)

    return root_logger


def get_logger(channel: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{channel}")


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    context: dict | None = None,
    extra_data: dict | None = None,
    exc_info: bool = False,
) -> None:
    """
    Emits a structured log entry with business context and extra metadata.

    Args:
        logger (logging.Logger): The channel logger to use.
        level (str): Log level name (DEBUG, INFO, WARNING, ERROR).
        message (str): Human-readable log message.
        context (dict | None): Business context, e.g. `{"student_id": ...}`.
        extra_data (dict | None): Additional metadata, e.g. `{"records": 4}`.
        exc_info (bool): If True, attaches the active exception's traceback.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.log(
        log_level,
        message,
        exc_info=exc_info,
        extra={
            "context": context or {},
            "extra_data": extra_data or {},
            "channel": logger.name.split(".")[-1],
        },
    )
