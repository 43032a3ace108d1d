"""Typed models shared by the resolver, codecs and dispatcher.

Records are opaque to this package: a record type only needs to provide the
encode/decode capability pair below. Nothing here requires inheritance.
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, Protocol, Self, TypeVar, Union, runtime_checkable

ConfigFormat = Literal["json", "toml", "xml", "yaml", "ron"]
SUPPORTED_CONFIG_FORMATS: tuple[ConfigFormat, ...] = ("json", "toml", "xml", "yaml", "ron")

ConfigPath = Union[str, "os.PathLike[str]"]


@runtime_checkable
class Encodable(Protocol):
    """Record that can render itself as a plain mapping."""

    def to_mapping(self) -> Mapping[str, object]:
        """Return a codec-friendly mapping of this record."""
        ...


@runtime_checkable
class Decodable(Protocol):
    """Record type that can be rebuilt from a plain mapping."""

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> Self:
        """Build a record from a decoded mapping."""
        ...


@runtime_checkable
class SelfDescribing(Protocol):
    """Record type that knows its own canonical config path."""

    @classmethod
    def config_path(cls) -> ConfigPath:
        """Return the canonical persistence path for this record type."""
        ...


DecodableT = TypeVar("DecodableT", bound=Decodable)
