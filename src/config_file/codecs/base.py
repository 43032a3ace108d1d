"""Codec protocol shared by all format bindings."""

from __future__ import annotations

from typing import Mapping, Protocol

from config_file.core.settings import CodecSettings
from config_file.core.types import ConfigFormat


class Codec(Protocol):
    """Uniform encode/decode interface over one config format.

    Implementations raise ConfigDeserializationError or
    ConfigSerializationError tagged with their format and never touch the
    filesystem.
    """

    config_format: ConfigFormat

    def decode(self, data: bytes, settings: CodecSettings) -> object:
        """Decode raw file bytes into plain Python values."""
        ...

    def encode(self, payload: Mapping[str, object], settings: CodecSettings) -> bytes:
        """Encode a plain mapping into file bytes."""
        ...
