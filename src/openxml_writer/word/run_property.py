"""Run formatting (w:rPr)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from lxml import etree

from openxml_writer.xml import XmlElement, check_xml_text, make_element


@dataclass(frozen=True)
class RunProperty(XmlElement):
    """Formatting state of one run.

    Every field is optional; unset fields are omitted from the XML. Setters
    return a new value and the last write for a field wins.
    """

    sz: int | None = None  # Half-points
    sz_cs: int | None = None
    color: str | None = None  # RRGGBB
    highlight: str | None = None
    underline: str | None = None
    bold: bool | None = None
    bold_cs: bool | None = None
    italic: bool | None = None
    italic_cs: bool | None = None
    vanish: bool | None = None

    def __post_init__(self) -> None:
        for name in ("color", "highlight", "underline"):
            value = getattr(self, name)
            if value is not None:
                check_xml_text(value, name)

    def with_size(self, size: int) -> RunProperty:
        return replace(self, sz=size, sz_cs=size)

    def with_color(self, color: str) -> RunProperty:
        return replace(self, color=color)

    def with_highlight(self, color: str) -> RunProperty:
        return replace(self, highlight=color)

    def with_underline(self, line_type: str) -> RunProperty:
        return replace(self, underline=line_type)

    def with_bold(self) -> RunProperty:
        return replace(self, bold=True, bold_cs=True)

    def with_italic(self) -> RunProperty:
        return replace(self, italic=True, italic_cs=True)

    def with_vanish(self) -> RunProperty:
        return replace(self, vanish=True)

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        rpr = make_element("w:rPr", parent)

        # CT_RPr sequence order
        for tag, flag in (
            ("w:b", self.bold),
            ("w:bCs", self.bold_cs),
            ("w:i", self.italic),
            ("w:iCs", self.italic_cs),
            ("w:vanish", self.vanish),
        ):
            if flag:
                make_element(tag, rpr)

        for tag, value in (
            ("w:color", self.color),
            ("w:sz", self.sz),
            ("w:szCs", self.sz_cs),
            ("w:highlight", self.highlight),
            ("w:u", self.underline),
        ):
            if value is not None:
                make_element(tag, rpr, {"w:val": value})

        return rpr

    def to_dict(self) -> dict[str, Any]:
        return {
            "sz": self.sz,
            "szCs": self.sz_cs,
            "color": self.color,
            "highlight": self.highlight,
            "underline": self.underline,
            "bold": self.bold,
            "boldCs": self.bold_cs,
            "italic": self.italic,
            "italicCs": self.italic_cs,
            "vanish": self.vanish,
        }
