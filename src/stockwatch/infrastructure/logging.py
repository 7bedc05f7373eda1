"""Logging configuration.

Modules log through ``structlog.get_logger(__name__)``; this module only
decides where events go and which levels pass.
"""

from __future__ import annotations

import logging
import sys

import structlog

DEFAULT_LEVEL = "WARNING"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = DEFAULT_LEVEL) -> None:
    """Render events as plain console lines on stderr, dropping anything
    below *level*."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
