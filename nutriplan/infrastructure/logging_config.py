"""structlog configuration."""

import logging
import sys
from typing import Optional

import structlog

from .config import get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Logs go to stderr so command output on stdout stays clean.

    Args:
        level: Log level name, defaults to LOG_LEVEL
        fmt: ``console`` or ``json``, defaults to LOG_FORMAT
    """
    level_name = (level or get_log_level()).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    renderer_name = fmt or get_log_format()

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if renderer_name == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
