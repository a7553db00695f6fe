"""structlog configuration shared across the application."""

import logging
import os
import sys

import structlog


def configure_logging(level: str | None = None, stream=None) -> None:
    """Configure structlog to render key/value events to stderr.

    Args:
        level: Log level name. Falls back to LOG_LEVEL, then WARNING.
        stream: File-like object to write to. Defaults to sys.stderr.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


configure_logging()
logger = structlog.get_logger("weather_cli")
