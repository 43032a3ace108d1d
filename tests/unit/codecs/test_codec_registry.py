"""Unit tests for the format to codec binding table."""

from __future__ import annotations

import pytest

from config_file.codecs.registry import bound_formats, codec_for
from config_file.core.errors import UnsupportedFormatError


def test_bound_formats_lists_enabled_codecs_in_order() -> None:
    """Bound formats should follow declaration order and omit RON."""
    assert bound_formats() == ("json", "toml", "xml", "yaml")


def test_codec_for_returns_codec_tagged_with_format() -> None:
    """Every bound codec should report the format it serves."""
    formats = tuple(codec_for(fmt).config_format for fmt in bound_formats())

    assert formats == bound_formats()


def test_codec_for_unbound_format_raises_unsupported() -> None:
    """Requesting a codec for RON should raise UnsupportedFormatError."""
    with pytest.raises(UnsupportedFormatError, match="ron"):
        codec_for("ron")
