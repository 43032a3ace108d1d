"""JSON codec backed by the standard library json module."""

from __future__ import annotations

import json
from typing import Mapping

from config_file.core.errors import ConfigDeserializationError, ConfigSerializationError
from config_file.core.settings import CodecSettings
from config_file.core.types import ConfigFormat


class JsonCodec:
    """Pretty-printing JSON codec."""

    config_format: ConfigFormat = "json"

    def decode(self, data: bytes, settings: CodecSettings) -> object:
        try:
            return json.loads(data.decode(settings.text_encoding))
        except UnicodeDecodeError as error:
            raise ConfigDeserializationError(
                f"Couldn't decode JSON file as {settings.text_encoding}: {error}.", "json"
            ) from error
        except json.JSONDecodeError as error:
            raise ConfigDeserializationError(
                f"Couldn't parse JSON file: {error.msg} at line {error.lineno} "
                f"column {error.colno}.",
                "json",
            ) from error

    def encode(self, payload: Mapping[str, object], settings: CodecSettings) -> bytes:
        try:
            text = json.dumps(payload, indent=settings.json_indent, ensure_ascii=False)
            return (text + "\n").encode(settings.text_encoding)
        except UnicodeEncodeError as error:
            raise ConfigSerializationError(
                f"Couldn't encode JSON output as {settings.text_encoding}: {error}.", "json"
            ) from error
        except (TypeError, ValueError) as error:
            raise ConfigSerializationError(
                f"Couldn't serialize record as JSON: {error}.", "json"
            ) from error
