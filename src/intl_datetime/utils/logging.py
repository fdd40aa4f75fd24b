"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from ..config import Settings


def setup_logging(log_level: str | None = None, log_format: str | None = None):
    """Configure structlog output to stdout.

    Level and renderer default to ``Settings.log_level`` and
    ``Settings.log_format``.  Should be called once by the host application.
    """
    settings = Settings()
    level = (log_level or settings.log_level).upper()
    renderer = (
        structlog.dev.ConsoleRenderer()
        if (log_format or settings.log_format) == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
