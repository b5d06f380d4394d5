"""Paragraphs (w:p)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from lxml import etree

from openxml_writer.types import AlignmentType
from openxml_writer.word.run import Run
from openxml_writer.xml import XmlElement, check_xml_text, make_element


@dataclass(frozen=True)
class ParagraphProperty(XmlElement):
    style: str | None = None
    alignment: AlignmentType | None = None

    def __post_init__(self) -> None:
        if self.style is not None:
            check_xml_text(self.style, "style")

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        ppr = make_element("w:pPr", parent)
        if self.style is not None:
            make_element("w:pStyle", ppr, {"w:val": self.style})
        if self.alignment is not None:
            make_element("w:jc", ppr, {"w:val": self.alignment.value})
        return ppr

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style,
            "alignment": self.alignment.value if self.alignment is not None else None,
        }


@dataclass(frozen=True)
class Paragraph(XmlElement):
    """A paragraph holding runs in insertion order."""

    paragraph_property: ParagraphProperty = field(default_factory=ParagraphProperty)
    children: tuple[Run, ...] = ()

    def add_run(self, run: Run) -> Paragraph:
        return replace(self, children=(*self.children, run))

    def style(self, style_id: str) -> Paragraph:
        return replace(self, paragraph_property=replace(self.paragraph_property, style=style_id))

    def align(self, alignment: AlignmentType) -> Paragraph:
        return replace(self, paragraph_property=replace(self.paragraph_property, alignment=alignment))

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.children)

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        paragraph = make_element("w:p", parent)
        self.paragraph_property.to_element(paragraph)
        for run in self.children:
            run.to_element(paragraph)
        return paragraph

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.paragraph_property.to_dict(),
            "children": [{"type": "run", "data": run.to_dict()} for run in self.children],
        }
