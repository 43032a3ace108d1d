"""TOML codec.

Reading uses the standard library tomllib parser and writing uses tomli-w,
which emits one table per section in multi-line form.
"""

from __future__ import annotations

import tomllib
from typing import Mapping

import tomli_w

from config_file.core.errors import ConfigDeserializationError, ConfigSerializationError
from config_file.core.settings import CodecSettings
from config_file.core.types import ConfigFormat


class TomlCodec:
    """TOML codec with separate reader and writer libraries."""

    config_format: ConfigFormat = "toml"

    def decode(self, data: bytes, settings: CodecSettings) -> object:
        try:
            return tomllib.loads(data.decode(settings.text_encoding))
        except UnicodeDecodeError as error:
            raise ConfigDeserializationError(
                f"Couldn't decode TOML file as {settings.text_encoding}: {error}.", "toml"
            ) from error
        except tomllib.TOMLDecodeError as error:
            raise ConfigDeserializationError(
                f"Toml deserialization error: {error}.", "toml"
            ) from error

    def encode(self, payload: Mapping[str, object], settings: CodecSettings) -> bytes:
        try:
            return tomli_w.dumps(payload).encode(settings.text_encoding)
        except UnicodeEncodeError as error:
            raise ConfigSerializationError(
                f"Couldn't encode TOML output as {settings.text_encoding}: {error}.", "toml"
            ) from error
        except (TypeError, ValueError) as error:
            raise ConfigSerializationError(
                f"Toml serialization error: {error}. TOML has no null value; "
                "omit fields set to None.",
                "toml",
            ) from error
