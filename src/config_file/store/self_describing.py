"""Load and store helpers for records that declare their own config path."""

from __future__ import annotations

from config_file.core.settings import CodecSettings
from config_file.core.types import ConfigPath, DecodableT, Encodable
from config_file.store.config_io import (
    load_config,
    load_config_or_default,
    store_config,
    store_config_without_overwrite,
)


def load_self(
    record_type: type[DecodableT],
    settings: CodecSettings | None = None,
) -> DecodableT | None:
    """Load a self-describing record from its canonical path."""
    return load_config(_config_path_of(record_type), record_type, settings)


def load_self_or_default(
    record_type: type[DecodableT],
    settings: CodecSettings | None = None,
) -> DecodableT:
    """Load a self-describing record or its default when the file is absent."""
    return load_config_or_default(_config_path_of(record_type), record_type, settings)


def store_self(record: Encodable, settings: CodecSettings | None = None) -> None:
    """Store a self-describing record at its canonical path."""
    store_config(record, _config_path_of(type(record)), settings)


def store_self_without_overwrite(record: Encodable, settings: CodecSettings | None = None) -> None:
    """Store a self-describing record unless its canonical path already exists."""
    store_config_without_overwrite(record, _config_path_of(type(record)), settings)


def _config_path_of(record_type: type) -> ConfigPath:
    config_path = getattr(record_type, "config_path", None)
    if not callable(config_path):
        raise TypeError(
            f"{record_type.__name__} does not declare config_path(); "
            "pass an explicit path to load_config or store_config instead."
        )
    return config_path()
