"""Config format resolution.

This module maps file extensions to config formats. Resolution is
case-insensitive and only considers formats with a bound codec.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from config_file.codecs.registry import bound_formats
from config_file.core.types import ConfigFormat, ConfigPath

_EXTENSION_FORMATS: Mapping[str, ConfigFormat] = {
    "json": "json",
    "toml": "toml",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
    "ron": "ron",
}


def resolve_format(extension: str) -> ConfigFormat | None:
    """Resolve a config format from a file extension.

    Args:
        extension: Extension with or without its leading dot.

    Returns:
        Matching bound format, or None when unrecognized.
    """
    normalized = extension.lower().removeprefix(".")
    config_format = _EXTENSION_FORMATS.get(normalized)
    if config_format is None or config_format not in bound_formats():
        return None
    return config_format


def resolve_format_from_path(path: ConfigPath) -> ConfigFormat | None:
    """Resolve a config format from the final suffix of a path's file name."""
    suffix = Path(path).suffix
    if not suffix:
        return None
    return resolve_format(suffix)


def format_extensions(config_format: ConfigFormat) -> tuple[str, ...]:
    """Return the extensions recognized for a format, without dots."""
    return tuple(
        extension for extension, fmt in _EXTENSION_FORMATS.items() if fmt == config_format
    )
