"""Unit tests for config-file error types."""

from __future__ import annotations

from pathlib import Path

from config_file.core.errors import (
    ConfigDeserializationError,
    ConfigFileAccessError,
    ConfigFileError,
    ConfigFileExistsError,
    ConfigFileNotFoundError,
)


def test_access_error_reports_not_found_cause() -> None:
    """Access errors wrapping FileNotFoundError should report not_found."""
    cause = FileNotFoundError(2, "No such file or directory")

    error = ConfigFileAccessError("missing", Path("a.toml"), cause)

    assert error.not_found
    assert error.cause is cause


def test_access_error_other_cause_is_not_not_found() -> None:
    """Permission failures should not be mistaken for missing files."""
    error = ConfigFileAccessError("denied", Path("a.toml"), PermissionError(13, "denied"))

    assert not error.not_found


def test_not_found_error_is_access_error() -> None:
    """Strict not-found errors should be catchable as access errors."""
    error = ConfigFileNotFoundError("missing", Path("a.toml"))

    assert isinstance(error, ConfigFileAccessError)
    assert error.not_found


def test_file_exists_error_names_path() -> None:
    """The already-exists error should carry and mention its path."""
    error = ConfigFileExistsError(Path("a.toml"))

    assert error.path == Path("a.toml")
    assert "a.toml" in str(error)


def test_codec_errors_carry_format_and_share_base() -> None:
    """Codec errors should be tagged with their format and be ConfigFileErrors."""
    error = ConfigDeserializationError("bad", "yaml")

    assert error.config_format == "yaml"
    assert isinstance(error, ConfigFileError)
