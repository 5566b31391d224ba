"""
Structured logging setup.
"""

import logging
import sys

import structlog

from eansearch.config import get_settings


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog for the client and CLI.

    Args:
        level: Log level name (uses settings if not provided)
        fmt: "json" or "text" (uses settings if not provided)
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    fmt = fmt or settings.log_format

    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
