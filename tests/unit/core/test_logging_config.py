"""Unit tests for structured logging setup."""

from __future__ import annotations

import structlog

from config_file.core.logging_config import get_logger


def test_get_logger_keeps_host_configuration() -> None:
    """A structlog setup made by the host should survive logger creation."""
    host_processors = [structlog.processors.KeyValueRenderer()]
    structlog.reset_defaults()
    structlog.configure(processors=host_processors)

    try:
        get_logger("config_file.tests")

        assert structlog.get_config()["processors"] == host_processors
    finally:
        structlog.reset_defaults()


def test_get_logger_configures_unconfigured_structlog() -> None:
    """Package defaults should apply when the host has not configured structlog."""
    structlog.reset_defaults()

    try:
        get_logger("config_file.tests")

        assert structlog.is_configured()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
    finally:
        structlog.reset_defaults()
