"""Public surface for config_file.

Read and write typed config records as JSON, TOML, XML or YAML, choosing
the format from the file extension or an explicit override.
"""

from __future__ import annotations

from config_file.codecs.registry import bound_formats, codec_for
from config_file.core.errors import (
    ConfigCodecError,
    ConfigDeserializationError,
    ConfigFileAccessError,
    ConfigFileError,
    ConfigFileExistsError,
    ConfigFileNotFoundError,
    ConfigSerializationError,
    ConfigSettingsError,
    UnsupportedFormatError,
)
from config_file.core.settings import CodecSettings
from config_file.core.types import (
    SUPPORTED_CONFIG_FORMATS,
    ConfigFormat,
    Decodable,
    Encodable,
    SelfDescribing,
)
from config_file.formats.resolver import (
    format_extensions,
    resolve_format,
    resolve_format_from_path,
)
from config_file.store.config_io import (
    load_config,
    load_config_or_default,
    load_config_with_format,
    require_config,
    store_config,
    store_config_with_format,
    store_config_without_overwrite,
)
from config_file.store.self_describing import (
    load_self,
    load_self_or_default,
    store_self,
    store_self_without_overwrite,
)

__all__ = [
    "SUPPORTED_CONFIG_FORMATS",
    "CodecSettings",
    "ConfigCodecError",
    "ConfigDeserializationError",
    "ConfigFileAccessError",
    "ConfigFileError",
    "ConfigFileExistsError",
    "ConfigFileNotFoundError",
    "ConfigFormat",
    "ConfigSerializationError",
    "ConfigSettingsError",
    "Decodable",
    "Encodable",
    "SelfDescribing",
    "UnsupportedFormatError",
    "bound_formats",
    "codec_for",
    "format_extensions",
    "load_config",
    "load_config_or_default",
    "load_config_with_format",
    "load_self",
    "load_self_or_default",
    "require_config",
    "resolve_format",
    "resolve_format_from_path",
    "store_config",
    "store_config_with_format",
    "store_config_without_overwrite",
    "store_self",
    "store_self_without_overwrite",
]
