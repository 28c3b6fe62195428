"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from edible.infrastructure.config import get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name, defaults to EDIBLE_LOG_LEVEL
        fmt: "console" or "json", defaults to EDIBLE_LOG_FORMAT
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if (fmt or get_log_format()) == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
