"""
Structured logging setup (structlog on top of stdlib logging).

Usage:
    from data_api.core.logging import get_logger, setup_logging

    setup_logging("DEBUG")        # call once at startup

    logger = get_logger(__name__)
    logger.warning("Something odd", field="title")
"""

from __future__ import annotations

import logging
import sys

import structlog

from data_api.core.config import settings

_configured = False


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure stdlib logging and the structlog processor chain.

    Log lines go to stderr.  Safe to call more than once; later calls
    only adjust the level and renderer.
    """
    global _configured

    level_name = (level or settings.LOG_LEVEL).upper()
    if json_logs is None:
        json_logs = settings.LOG_JSON

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    root = logging.getLogger()
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(level_name)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Keep loggers lazy so structlog.testing.capture_logs still works
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``.  Does not configure logging."""
    return structlog.get_logger(name)
