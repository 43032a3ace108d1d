"""Unit tests for config file IO helpers."""

from __future__ import annotations

import pytest

from config_file.core.errors import ConfigFileAccessError, ConfigFileExistsError
from config_file.store.file_io import ensure_parent_dir, read_config_bytes, write_config_bytes


def test_read_config_bytes_missing_file_returns_none(tmp_path) -> None:
    """Missing files should read as None."""
    assert read_config_bytes(tmp_path / "missing.json") is None


def test_read_config_bytes_returns_full_content(tmp_path) -> None:
    """Existing files should be read in full."""
    config_path = tmp_path / "config.json"
    config_path.write_bytes(b'{"a": 1}')

    assert read_config_bytes(config_path) == b'{"a": 1}'


def test_read_config_bytes_directory_raises_access_error(tmp_path) -> None:
    """Reading a directory should raise an access error wrapping the OSError."""
    with pytest.raises(ConfigFileAccessError) as error_info:
        read_config_bytes(tmp_path)

    assert isinstance(error_info.value.cause, OSError)


def test_ensure_parent_dir_creates_chain(tmp_path) -> None:
    """All intermediate directories should be created."""
    config_path = tmp_path / "a" / "b" / "config.toml"

    ensure_parent_dir(config_path)

    assert config_path.parent.is_dir()


def test_write_config_bytes_exclusive_existing_file_raises(tmp_path) -> None:
    """Exclusive writes should refuse existing files without modifying them."""
    config_path = tmp_path / "config.toml"
    config_path.write_bytes(b"old")

    with pytest.raises(ConfigFileExistsError):
        write_config_bytes(config_path, b"new", overwrite=False)

    assert config_path.read_bytes() == b"old"


def test_write_config_bytes_overwrite_truncates(tmp_path) -> None:
    """Overwriting writes should replace longer existing content."""
    config_path = tmp_path / "config.toml"
    config_path.write_bytes(b"much longer old content")

    write_config_bytes(config_path, b"new", overwrite=True)

    assert config_path.read_bytes() == b"new"
