import logging
import os
from typing import Any, Optional

# Map string log levels to logging constants
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# LogRecord attributes that are never rendered as extras
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)


# Longest rendering of a single extra value
MAX_VALUE_LENGTH = 200


def format_extra(key: str, value: Any) -> str:
    """Render one ``extra`` entry as ``key=value``."""
    if key == "event_type":
        return f"type={value}"
    if key == "request" and isinstance(value, dict):
        return f"request={value.get('method', 'GET')} {value.get('url', '')}"
    if key == "response" and isinstance(value, dict):
        return f"response={value.get('status_code', '')}"

    text = str(value)
    if len(text) > MAX_VALUE_LENGTH:
        text = text[:MAX_VALUE_LENGTH] + "..."
    # Slack messages and error bodies span several lines
    if any(c.isspace() for c in text):
        return f"{key}={text!r}"
    return f"{key}={text}"


class StructuredFormatter(logging.Formatter):
    """Single-line formatter: ``timestamp | LEVEL | logger | message | extras``."""

    def format(self, record):
        timestamp = self.formatTime(record, self.datefmt or "%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        logger_name = record.name.split(".")[-1][:20].ljust(20)
        log_line = f"{timestamp} | {level} | {logger_name} | {record.getMessage()}"

        extras = [
            format_extra(key, value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and value is not None
        ]
        if extras:
            log_line += f" | {' '.join(extras)}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


def configure_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance with consistent formatting and level.

    Args:
        name (Optional[str]): Logger name. If None, uses the safe_watcher root logger

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name if name else "safe_watcher")

    # Set log level from environment variable, default to INFO if not set
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = LOG_LEVELS.get(log_level_str, logging.INFO)
    logger.setLevel(log_level)

    # Add console handler if none exists
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(StructuredFormatter())
        logger.addHandler(console_handler)

    return logger
