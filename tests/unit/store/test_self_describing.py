"""Unit tests for self-describing record helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from config_file.core.errors import ConfigFileExistsError
from config_file.store.self_describing import (
    load_self,
    load_self_or_default,
    store_self,
    store_self_without_overwrite,
)
from tests.record_fixtures import HomeConfig, ServerConfig


def test_store_self_writes_to_declared_path(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Records should be stored at their own config path and load back."""
    monkeypatch.chdir(tmp_path)
    record = HomeConfig(host="home.example", port=9000)

    store_self(record)

    assert (tmp_path / "settings" / "home.toml").is_file()
    assert load_self(HomeConfig) == record


def test_load_self_missing_file_returns_none(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing declared path should load as None."""
    monkeypatch.chdir(tmp_path)

    assert load_self(HomeConfig) is None
    assert load_self_or_default(HomeConfig) == HomeConfig()


def test_store_self_without_overwrite_refuses_second_write(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The no-overwrite helper should keep the first stored record."""
    monkeypatch.chdir(tmp_path)
    store_self_without_overwrite(HomeConfig(host="first"))

    with pytest.raises(ConfigFileExistsError):
        store_self_without_overwrite(HomeConfig(host="second"))

    assert load_self(HomeConfig) == HomeConfig(host="first")


def test_store_self_requires_declared_path(tmp_path) -> None:
    """Records without config_path() should be rejected."""
    with pytest.raises(TypeError, match="config_path"):
        store_self(ServerConfig())

    assert list(Path(tmp_path).iterdir()) == []
