"""Shared lxml helpers for projecting elements to XML."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from lxml import etree

from openxml_writer.namespaces import NSMAP, qn

# Characters outside the XML 1.0 Char production
_XML_INCOMPATIBLE = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def check_xml_text(value: str, field_name: str) -> str:
    """Return ``value`` if it can be written as XML character data.

    Raises:
        ValueError: If ``value`` holds NUL, a control character or any other
            code point XML 1.0 cannot carry.
    """
    match = _XML_INCOMPATIBLE.search(value)
    if match:
        raise ValueError(
            f"{field_name} contains a character that cannot appear in XML: "
            f"U+{ord(match.group()):04X} at index {match.start()}"
        )
    return value


def _prefixes(names: list[str]) -> dict[str, str]:
    nsmap = {}
    for name in names:
        prefix, sep, _ = name.partition(":")
        if sep and prefix != "xml":
            nsmap[prefix] = NSMAP[prefix]
    return nsmap


def make_element(
    tag: str,
    parent: etree._Element | None = None,
    attrs: dict[str, Any] | None = None,
) -> etree._Element:
    """Create a prefixed element, optionally as the last child of ``parent``.

    Tag and attribute names use prefixes from NSMAP (``w:br``, ``r:embed``).
    Namespaces already declared on an ancestor are not declared again.
    Attributes are written in the order given.
    """
    attrs = attrs or {}
    nsmap = _prefixes([tag, *attrs])
    if parent is None:
        element = etree.Element(qn(tag), nsmap=nsmap)
    else:
        element = etree.SubElement(parent, qn(tag), nsmap=nsmap)
    for name, value in attrs.items():
        element.set(qn(name), str(value))
    return element


def to_part_bytes(root: etree._Element) -> bytes:
    """Serialize a part root with a standalone UTF-8 declaration."""
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", standalone=True)


class XmlElement(ABC):
    """An entity that projects itself into WordprocessingML."""

    @abstractmethod
    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        """Build this entity as an lxml element, appended to ``parent`` if given."""

    def to_xml(self) -> bytes:
        """Serialize this entity as a standalone XML fragment."""
        return etree.tostring(self.to_element())
