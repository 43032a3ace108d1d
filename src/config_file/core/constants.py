"""Core constants used across config_file modules.

Keeping values here avoids magic literals in codec and dispatch logic.
"""

from __future__ import annotations

DEFAULT_TEXT_ENCODING = "utf-8"
DEFAULT_JSON_INDENT = 2
DEFAULT_YAML_SORT_KEYS = False
DEFAULT_XML_ROOT_TAG = "config"
XML_TRUE_TEXT = "true"
XML_FALSE_TEXT = "false"
XML_KIND_ATTRIBUTE = "kind"
XML_LIST_KIND = "list"
XML_MAPPING_KIND = "map"
XML_ITEM_TAG = "item"
