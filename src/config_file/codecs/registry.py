"""Binding table from config formats to their codecs.

RON stays a recognized format but has no bound codec, so it resolves as
unrecognized and dispatch to it raises UnsupportedFormatError.
"""

from __future__ import annotations

from typing import Mapping

from config_file.codecs.base import Codec
from config_file.codecs.json_codec import JsonCodec
from config_file.codecs.toml_codec import TomlCodec
from config_file.codecs.xml_codec import XmlCodec
from config_file.codecs.yaml_codec import YamlCodec
from config_file.core.errors import UnsupportedFormatError
from config_file.core.types import SUPPORTED_CONFIG_FORMATS, ConfigFormat

_BOUND_CODECS: Mapping[ConfigFormat, Codec] = {
    "json": JsonCodec(),
    "toml": TomlCodec(),
    "xml": XmlCodec(),
    "yaml": YamlCodec(),
}


def bound_formats() -> tuple[ConfigFormat, ...]:
    """Return formats with a bound codec, in declaration order."""
    return tuple(fmt for fmt in SUPPORTED_CONFIG_FORMATS if fmt in _BOUND_CODECS)


def codec_for(config_format: ConfigFormat) -> Codec:
    """Return the codec bound to a format.

    Args:
        config_format: Target config format.

    Returns:
        Bound codec instance.

    Raises:
        UnsupportedFormatError: If no codec is bound for the format.
    """
    codec = _BOUND_CODECS.get(config_format)
    if codec is None:
        bound_rows = ", ".join(bound_formats())
        raise UnsupportedFormatError(
            f"No codec is bound for format '{config_format}'. Use one of: {bound_rows}."
        )
    return codec
