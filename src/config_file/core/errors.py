"""Config-file exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure kind raises a specific error type so callers can branch on it.
"""

from __future__ import annotations

from pathlib import Path

from config_file.core.types import ConfigFormat


class ConfigFileError(Exception):
    """Base exception for all config-file failures."""


class ConfigSettingsError(ConfigFileError):
    """Raised for invalid codec settings."""


class ConfigFileAccessError(ConfigFileError):
    """Raised when a config file or its directory cannot be read or written."""

    def __init__(self, message: str, path: Path, cause: OSError | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    @property
    def not_found(self) -> bool:
        """Return whether the underlying failure is a missing file."""
        return isinstance(self.cause, FileNotFoundError)


class ConfigFileNotFoundError(ConfigFileAccessError):
    """Raised by strict loads when the config file does not exist."""

    @property
    def not_found(self) -> bool:
        return True


class ConfigFileExistsError(ConfigFileError):
    """Raised when a no-overwrite store finds the target already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Config file already exists at {path}. "
            "Remove it or use store_config to overwrite."
        )
        self.path = path


class UnsupportedFormatError(ConfigFileError):
    """Raised when no bound codec matches the requested format."""


class ConfigCodecError(ConfigFileError):
    """Base for codec-level failures tagged with their format."""

    def __init__(self, message: str, config_format: ConfigFormat) -> None:
        super().__init__(message)
        self.config_format = config_format


class ConfigDeserializationError(ConfigCodecError):
    """Raised when file content cannot be decoded into the record type."""


class ConfigSerializationError(ConfigCodecError):
    """Raised when a record cannot be encoded by its format codec."""
