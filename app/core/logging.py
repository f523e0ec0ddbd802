"""Structured logging configuration for the quiz service.

Every line is a flat run of ``key=value`` pairs. Values containing spaces,
quotes or ``=`` are double-quoted so a line still splits cleanly into pairs.
"""

import logging
import sys
from typing import Any

_LEVELS_BY_ENV = {
    "dev": logging.DEBUG,
    "test": logging.DEBUG,
}


def _render(value: Any) -> str:
    text = str(value)
    if text == "" or any(c in text for c in ' "='):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


class StructuredFormatter(logging.Formatter):
    """key=value structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if hasattr(record, "submission_id"):
            log_data["submission_id"] = record.submission_id

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        line = " ".join(f"{k}={_render(v)}" for k, v in log_data.items())
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _level_from_settings() -> int:
    try:
        from app.core.config import get_settings

        return _LEVELS_BY_ENV.get(get_settings().QUIZ_ENV, logging.INFO)
    except Exception:
        # Unreadable settings fall back to INFO
        return logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger writing structured lines to stdout.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(_level_from_settings())

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional context fields.

    ``submission_id`` gets its own slot right after the message; every other
    keyword is appended as a key=value pair.
    """
    submission_id = kwargs.pop("submission_id", None)
    extra: dict[str, Any] = {"extra_data": kwargs}
    if submission_id is not None:
        extra["submission_id"] = submission_id

    logger.log(level, msg, extra=extra)
