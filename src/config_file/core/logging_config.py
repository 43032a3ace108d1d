"""Structured logging configuration.

This module hands out structlog loggers. A structlog configuration set up by
the host application is left untouched; only an unconfigured structlog gets
the package defaults, which filter out debug events.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str, level: int = logging.INFO) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        level: Minimum level emitted when structlog is not yet configured.

    Returns:
        A structlog logger.
    """
    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            cache_logger_on_first_use=True,
        )
    return structlog.get_logger(name)
