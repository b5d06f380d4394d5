"""Table cells (w:tc)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from lxml import etree

from openxml_writer.types import BorderPosition, BorderType, VAlignType, VMergeType
from openxml_writer.word.paragraph import Paragraph
from openxml_writer.xml import XmlElement, check_xml_text, make_element


@dataclass(frozen=True)
class TableCellBorder(XmlElement):
    """One edge of a cell border. Size is in eighths of a point."""

    position: BorderPosition
    border_type: BorderType = BorderType.SINGLE
    size: int = 2
    color: str = "000000"
    space: int = 0

    def __post_init__(self) -> None:
        check_xml_text(self.color, "color")

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        return make_element(
            f"w:{self.position.value}",
            parent,
            {
                "w:val": self.border_type.value,
                "w:sz": self.size,
                "w:space": self.space,
                "w:color": self.color,
            },
        )


_BORDER_ORDER = {position: index for index, position in enumerate(BorderPosition)}


@dataclass(frozen=True)
class TableCellProperty(XmlElement):
    width: int | None = None  # Twentieths of a point
    grid_span: int | None = None
    vertical_merge: VMergeType | None = None
    vertical_align: VAlignType | None = None
    borders: tuple[TableCellBorder, ...] = ()

    def with_border(self, border: TableCellBorder) -> TableCellProperty:
        """Set one edge, replacing any border already at that position."""
        kept = tuple(b for b in self.borders if b.position is not border.position)
        borders = sorted((*kept, border), key=lambda b: _BORDER_ORDER[b.position])
        return replace(self, borders=tuple(borders))

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        tcpr = make_element("w:tcPr", parent)
        if self.width is not None:
            make_element("w:tcW", tcpr, {"w:w": self.width, "w:type": "dxa"})
        if self.grid_span is not None:
            make_element("w:gridSpan", tcpr, {"w:val": self.grid_span})
        if self.vertical_merge is not None:
            make_element("w:vMerge", tcpr, {"w:val": self.vertical_merge.value})
        if self.borders:
            borders = make_element("w:tcBorders", tcpr)
            for border in self.borders:
                border.to_element(borders)
        if self.vertical_align is not None:
            make_element("w:vAlign", tcpr, {"w:val": self.vertical_align.value})
        return tcpr

    def to_dict(self) -> dict[str, Any]:
        view: dict[str, Any] = {}
        if self.vertical_merge is not None:
            view["verticalMerge"] = self.vertical_merge.value
        if self.vertical_align is not None:
            view["verticalAlign"] = self.vertical_align.value
        if self.grid_span is not None:
            view["gridSpan"] = self.grid_span
        if self.width is not None:
            view["width"] = self.width
        return view


@dataclass(frozen=True)
class TableCell(XmlElement):
    """A table cell holding paragraphs.

    The schema requires at least one paragraph per cell; callers assembling
    a table are expected to add one.
    """

    cell_property: TableCellProperty = field(default_factory=TableCellProperty)
    children: tuple[Paragraph, ...] = ()

    def add_paragraph(self, paragraph: Paragraph) -> TableCell:
        return replace(self, children=(*self.children, paragraph))

    def _with(self, **changes: Any) -> TableCell:
        return replace(self, cell_property=replace(self.cell_property, **changes))

    def vertical_merge(self, merge: VMergeType) -> TableCell:
        return self._with(vertical_merge=merge)

    def vertical_align(self, align: VAlignType) -> TableCell:
        return self._with(vertical_align=align)

    def grid_span(self, span: int) -> TableCell:
        return self._with(grid_span=span)

    def width(self, width: int) -> TableCell:
        return self._with(width=width)

    def border(self, border: TableCellBorder) -> TableCell:
        return replace(self, cell_property=self.cell_property.with_border(border))

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        cell = make_element("w:tc", parent)
        self.cell_property.to_element(cell)
        for paragraph in self.children:
            paragraph.to_element(cell)
        return cell

    def to_dict(self) -> dict[str, Any]:
        return {
            "children": [{"type": "paragraph", "data": p.to_dict()} for p in self.children],
            "property": self.cell_property.to_dict(),
        }
