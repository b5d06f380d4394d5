"""Leaf content of a run: text, deleted text, tabs and breaks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from lxml import etree

from openxml_writer.types import BreakType
from openxml_writer.xml import XmlElement, check_xml_text, make_element


class RunChildKind(Enum):
    """Tags of the content a run can hold, as exposed to host applications."""

    TEXT = "text"
    DELETE_TEXT = "deleteText"
    TAB = "tab"
    BREAK = "break"
    DRAWING = "drawing"


@dataclass(frozen=True)
class Text(XmlElement):
    """Literal run text (w:t). Whitespace is always preserved."""

    text: str
    preserve_space: bool = True

    kind: ClassVar[RunChildKind] = RunChildKind.TEXT

    def __post_init__(self) -> None:
        check_xml_text(self.text, "Text")

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        attrs = {"xml:space": "preserve"} if self.preserve_space else {}
        element = make_element("w:t", parent, attrs)
        element.text = self.text
        return element

    def to_dict(self) -> dict[str, Any]:
        return {"preserveSpace": self.preserve_space, "text": self.text}


@dataclass(frozen=True)
class DeleteText(XmlElement):
    """Text removed under revision tracking (w:delText)."""

    text: str
    preserve_space: bool = True

    kind: ClassVar[RunChildKind] = RunChildKind.DELETE_TEXT

    def __post_init__(self) -> None:
        check_xml_text(self.text, "DeleteText")

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        attrs = {"xml:space": "preserve"} if self.preserve_space else {}
        element = make_element("w:delText", parent, attrs)
        element.text = self.text
        return element

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "preserveSpace": self.preserve_space}


@dataclass(frozen=True)
class Tab(XmlElement):
    kind: ClassVar[RunChildKind] = RunChildKind.TAB

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        return make_element("w:tab", parent)

    def to_dict(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class Break(XmlElement):
    """A page, column or line break (w:br)."""

    break_type: BreakType

    kind: ClassVar[RunChildKind] = RunChildKind.BREAK

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        return make_element("w:br", parent, {"w:type": self.break_type.value})

    def to_dict(self) -> dict[str, Any]:
        return {"breakType": self.break_type.value}
