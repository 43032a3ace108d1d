"""Config load and store dispatch.

This module resolves the format of a config path, performs file IO and
hands bytes to the bound codec. Loads follow the optional policy: a missing
file yields None, while every other failure raises.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, cast

from config_file.codecs.registry import bound_formats, codec_for
from config_file.core.errors import (
    ConfigDeserializationError,
    ConfigFileExistsError,
    ConfigFileNotFoundError,
    ConfigSerializationError,
    UnsupportedFormatError,
)
from config_file.core.logging_config import get_logger
from config_file.core.settings import CodecSettings, resolve_settings
from config_file.core.types import ConfigFormat, ConfigPath, DecodableT, Encodable
from config_file.formats.resolver import format_extensions, resolve_format_from_path
from config_file.store.file_io import ensure_parent_dir, read_config_bytes, write_config_bytes

_LOGGER = get_logger(__name__)


def load_config_with_format(
    path: ConfigPath,
    record_type: type[DecodableT],
    config_format: ConfigFormat,
    settings: CodecSettings | None = None,
) -> DecodableT | None:
    """Load a record from a config file using an explicit format.

    Args:
        path: Config file path.
        record_type: Record type implementing ``from_mapping``.
        config_format: Format used to decode the file, whatever its extension.
        settings: Optional codec settings.

    Returns:
        Decoded record, or None when the file does not exist.

    Raises:
        UnsupportedFormatError: If no codec is bound for the format.
        ConfigFileAccessError: If the file exists but cannot be read.
        ConfigDeserializationError: If the content cannot be decoded.
    """
    config_path = Path(path)
    codec = codec_for(config_format)
    data = read_config_bytes(config_path)
    if data is None:
        _LOGGER.debug("config_missing", path=str(config_path), config_format=config_format)
        return None
    payload = codec.decode(data, resolve_settings(settings))
    record = _record_from_payload(record_type, payload, config_format, config_path)
    _LOGGER.debug("config_loaded", path=str(config_path), config_format=config_format)
    return record


def load_config(
    path: ConfigPath,
    record_type: type[DecodableT],
    settings: CodecSettings | None = None,
) -> DecodableT | None:
    """Load a record from a config file, inferring the format from its extension.

    Returns:
        Decoded record, or None when the file does not exist.

    Raises:
        UnsupportedFormatError: If the extension is unrecognized.
    """
    config_format = _require_format(path)
    return load_config_with_format(path, record_type, config_format, settings)


def require_config(
    path: ConfigPath,
    record_type: type[DecodableT],
    settings: CodecSettings | None = None,
) -> DecodableT:
    """Load a record that must exist.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
    """
    record = load_config(path, record_type, settings)
    if record is None:
        config_path = Path(path)
        raise ConfigFileNotFoundError(
            f"Config file not found at {config_path}. Create it or use load_config_or_default.",
            config_path,
        )
    return record


def load_config_or_default(
    path: ConfigPath,
    record_type: type[DecodableT],
    settings: CodecSettings | None = None,
) -> DecodableT:
    """Load a record, falling back to ``record_type()`` when the file is absent.

    Only a missing file falls back. Access and decode failures propagate.
    """
    record = load_config(path, record_type, settings)
    if record is None:
        return record_type()
    return record


def store_config_with_format(
    record: Encodable,
    path: ConfigPath,
    config_format: ConfigFormat,
    settings: CodecSettings | None = None,
) -> None:
    """Store a record using an explicit format, overwriting any existing file.

    Args:
        record: Record implementing ``to_mapping``.
        path: Target config file path. Missing parent directories are created.
        config_format: Format used to encode the record.
        settings: Optional codec settings.

    Raises:
        UnsupportedFormatError: If no codec is bound for the format.
        ConfigSerializationError: If the record cannot be encoded.
        ConfigFileAccessError: If directories or the file cannot be written.
    """
    _write_record(record, Path(path), config_format, settings, overwrite=True)


def store_config(
    record: Encodable,
    path: ConfigPath,
    settings: CodecSettings | None = None,
) -> None:
    """Store a record, inferring the format from the path extension.

    Raises:
        UnsupportedFormatError: If the extension is unrecognized.
    """
    config_format = _require_format(path)
    store_config_with_format(record, path, config_format, settings)


def store_config_without_overwrite(
    record: Encodable,
    path: ConfigPath,
    settings: CodecSettings | None = None,
) -> None:
    """Store a record only when nothing exists at the path yet.

    The existence check runs before format resolution, so an occupied path
    fails with ConfigFileExistsError whatever its extension. The file is
    created exclusively, so a writer that appears between the existence
    check and the write still results in ConfigFileExistsError.

    Raises:
        ConfigFileExistsError: If the path already exists. The file is left untouched.
        UnsupportedFormatError: If the extension is unrecognized.
    """
    config_path = Path(path)
    if os.path.lexists(config_path):
        _LOGGER.warning("config_store_refused", path=str(config_path), reason="file_exists")
        raise ConfigFileExistsError(config_path)
    config_format = _require_format(config_path)
    _write_record(record, config_path, config_format, settings, overwrite=False)


def _write_record(
    record: Encodable,
    config_path: Path,
    config_format: ConfigFormat,
    settings: CodecSettings | None,
    overwrite: bool,
) -> None:
    codec = codec_for(config_format)
    payload = _payload_from_record(record, config_format)
    data = codec.encode(payload, resolve_settings(settings))
    ensure_parent_dir(config_path)
    write_config_bytes(config_path, data, overwrite)
    _LOGGER.debug(
        "config_stored",
        path=str(config_path),
        config_format=config_format,
        byte_count=len(data),
        overwrite=overwrite,
    )


def _require_format(path: ConfigPath) -> ConfigFormat:
    config_format = resolve_format_from_path(path)
    if config_format is None:
        extension_rows = ", ".join(
            f".{extension}" for fmt in bound_formats() for extension in format_extensions(fmt)
        )
        raise UnsupportedFormatError(
            f"Don't know how to parse config file {Path(path)}: "
            f"unrecognized extension '{Path(path).suffix}'. Use one of: {extension_rows}."
        )
    return config_format


def _record_from_payload(
    record_type: type[DecodableT],
    payload: object,
    config_format: ConfigFormat,
    config_path: Path,
) -> DecodableT:
    if not isinstance(payload, Mapping):
        raise ConfigDeserializationError(
            f"Couldn't decode {config_format} file at {config_path}: "
            f"expected a mapping at top level, got {type(payload).__name__}.",
            config_format,
        )
    try:
        return cast(DecodableT, record_type.from_mapping(payload))
    except (KeyError, TypeError, ValueError) as error:
        raise ConfigDeserializationError(
            f"Couldn't build {record_type.__name__} from {config_format} file at "
            f"{config_path}: {error!r}.",
            config_format,
        ) from error


def _payload_from_record(record: Encodable, config_format: ConfigFormat) -> Mapping[str, object]:
    payload = record.to_mapping()
    if not isinstance(payload, Mapping):
        raise ConfigSerializationError(
            f"Couldn't serialize {type(record).__name__} as {config_format}: "
            f"to_mapping returned {type(payload).__name__}, expected a mapping.",
            config_format,
        )
    return payload
