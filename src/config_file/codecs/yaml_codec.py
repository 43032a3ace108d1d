"""YAML codec backed by PyYAML safe loader and dumper."""

from __future__ import annotations

from typing import Mapping

import yaml  # type: ignore[import-untyped]

from config_file.core.errors import ConfigDeserializationError, ConfigSerializationError
from config_file.core.settings import CodecSettings
from config_file.core.types import ConfigFormat


class YamlCodec:
    """Block-style YAML codec."""

    config_format: ConfigFormat = "yaml"

    def decode(self, data: bytes, settings: CodecSettings) -> object:
        try:
            return yaml.safe_load(data.decode(settings.text_encoding))
        except UnicodeDecodeError as error:
            raise ConfigDeserializationError(
                f"Couldn't decode YAML file as {settings.text_encoding}: {error}.", "yaml"
            ) from error
        except yaml.YAMLError as error:
            raise ConfigDeserializationError(f"Couldn't parse YAML file: {error}.", "yaml") from error

    def encode(self, payload: Mapping[str, object], settings: CodecSettings) -> bytes:
        try:
            text = yaml.safe_dump(
                dict(payload),
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=settings.yaml_sort_keys,
            )
            return text.encode(settings.text_encoding)
        except UnicodeEncodeError as error:
            raise ConfigSerializationError(
                f"Couldn't encode YAML output as {settings.text_encoding}: {error}.", "yaml"
            ) from error
        except yaml.YAMLError as error:
            raise ConfigSerializationError(
                f"Couldn't serialize record as YAML: {error}.", "yaml"
            ) from error
