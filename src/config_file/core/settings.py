"""Codec presentation settings.

Settings are passed explicitly to load/store calls. There is no environment
lookup: config files are read exactly as written.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from config_file.core.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_TEXT_ENCODING,
    DEFAULT_XML_ROOT_TAG,
    DEFAULT_YAML_SORT_KEYS,
)
from config_file.core.errors import ConfigSettingsError


@dataclass(frozen=True)
class CodecSettings:
    """Validated codec settings.

    Attributes:
        text_encoding: Encoding for text-based formats.
        json_indent: Indentation width for pretty JSON output.
        yaml_sort_keys: Whether YAML output sorts mapping keys.
        xml_root_tag: Root element name wrapping XML documents.
    """

    text_encoding: str = DEFAULT_TEXT_ENCODING
    json_indent: int = DEFAULT_JSON_INDENT
    yaml_sort_keys: bool = DEFAULT_YAML_SORT_KEYS
    xml_root_tag: str = DEFAULT_XML_ROOT_TAG

    def __post_init__(self) -> None:
        _validate_settings(self)

    @classmethod
    def default(cls) -> "CodecSettings":
        """Return settings populated with package defaults."""
        return cls()


def resolve_settings(settings: CodecSettings | None) -> CodecSettings:
    """Return the given settings or package defaults."""
    return settings if settings is not None else CodecSettings.default()


def _validate_settings(settings: CodecSettings) -> None:
    """Reject settings the codecs cannot honor.

    Raises:
        ConfigSettingsError: If any field is out of range.
    """
    if settings.json_indent < 0:
        raise ConfigSettingsError(
            f"Invalid json_indent {settings.json_indent}: expected a non-negative integer."
        )
    if not settings.xml_root_tag.strip():
        raise ConfigSettingsError("Invalid xml_root_tag: expected a non-empty element name.")
    try:
        codecs.lookup(settings.text_encoding)
    except LookupError as error:
        raise ConfigSettingsError(
            f"Invalid text_encoding '{settings.text_encoding}': expected a codec name such as utf-8."
        ) from error
