"""XML codec backed by the standard library ElementTree.

Mappings become child elements named after their keys and scalars become
element text. Sequences become an element marked ``kind="list"`` holding one
``<item>`` per entry, and empty mappings are marked ``kind="map"``, so list
and section shapes survive decoding even when empty or single-valued.
Unmarked repeated siblings, as found in hand-written files, decode to lists.
Leaf values decode as text and record types coerce them to field types.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Mapping, Sequence

from config_file.core.constants import (
    XML_FALSE_TEXT,
    XML_ITEM_TAG,
    XML_KIND_ATTRIBUTE,
    XML_LIST_KIND,
    XML_MAPPING_KIND,
    XML_TRUE_TEXT,
)
from config_file.core.errors import ConfigDeserializationError, ConfigSerializationError
from config_file.core.settings import CodecSettings
from config_file.core.types import ConfigFormat

_XML_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")


class XmlCodec:
    """Indented XML codec wrapping documents in a configurable root tag."""

    config_format: ConfigFormat = "xml"

    def decode(self, data: bytes, settings: CodecSettings) -> object:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as error:
            raise ConfigDeserializationError(f"Xml deserialization error: {error}.", "xml") from error
        return _mapping_from_children(root)

    def encode(self, payload: Mapping[str, object], settings: CodecSettings) -> bytes:
        root = ET.Element(settings.xml_root_tag)
        try:
            _append_mapping(root, payload)
        except (TypeError, ValueError) as error:
            raise ConfigSerializationError(f"Xml serialization error: {error}.", "xml") from error
        ET.indent(root)
        document = ET.tostring(root, encoding=settings.text_encoding, xml_declaration=True)
        return document + b"\n"


def _append_mapping(parent: ET.Element, payload: Mapping[str, object]) -> None:
    for key, value in payload.items():
        tag = _element_name(key)
        if value is None:
            continue
        _append_value(parent, tag, value)


def _append_value(parent: ET.Element, tag: str, value: object) -> None:
    child = ET.SubElement(parent, tag)
    if isinstance(value, Mapping):
        if not value:
            child.set(XML_KIND_ATTRIBUTE, XML_MAPPING_KIND)
        _append_mapping(child, value)
        return
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        child.set(XML_KIND_ATTRIBUTE, XML_LIST_KIND)
        for item in value:
            if item is None:
                raise TypeError(f"list under '{tag}' contains None")
            _append_value(child, XML_ITEM_TAG, item)
        return
    child.text = _scalar_text(value)


def _scalar_text(value: object) -> str:
    if isinstance(value, bool):
        return XML_TRUE_TEXT if value else XML_FALSE_TEXT
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"unsupported value type {type(value).__name__}")


def _element_name(key: object) -> str:
    if not isinstance(key, str) or not _XML_NAME_PATTERN.match(key):
        raise ValueError(f"key {key!r} is not a valid XML element name")
    return key


def _element_to_value(element: ET.Element) -> object:
    kind = element.get(XML_KIND_ATTRIBUTE)
    if kind == XML_LIST_KIND:
        return [_element_to_value(child) for child in element]
    if kind == XML_MAPPING_KIND or len(element) > 0:
        return _mapping_from_children(element)
    return element.text or ""


def _mapping_from_children(element: ET.Element) -> dict[str, object]:
    mapping: dict[str, object] = {}
    repeated_tags: set[str] = set()
    for child in element:
        value = _element_to_value(child)
        if child.tag not in mapping:
            mapping[child.tag] = value
            continue
        if child.tag not in repeated_tags:
            mapping[child.tag] = [mapping[child.tag]]
            repeated_tags.add(child.tag)
        existing = mapping[child.tag]
        if isinstance(existing, list):
            existing.append(value)
    return mapping
