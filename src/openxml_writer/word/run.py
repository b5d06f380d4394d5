"""Runs (w:r): uniformly formatted content pieces in a fixed order."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Union

from lxml import etree

from openxml_writer.types import BreakType
from openxml_writer.word.drawing import Drawing
from openxml_writer.word.run_property import RunProperty
from openxml_writer.word.text import Break, DeleteText, RunChildKind, Tab, Text
from openxml_writer.xml import XmlElement, make_element

RunChild = Union[Text, DeleteText, Tab, Break, Drawing]

_TEXT_STREAM = {
    RunChildKind.TEXT: lambda child: child.text,
    RunChildKind.TAB: lambda child: "\t",
    RunChildKind.BREAK: lambda child: "\n",
}


@dataclass(frozen=True)
class Run(XmlElement):
    """A run of content sharing one RunProperty.

    Builder methods never mutate; each returns a new Run, so runs can be
    shared and extended freely::

        run = Run().bold().add_text("Total").add_tab().add_text("42")

    Children are kept exactly in insertion order. The run does not check the
    sequence against the schema; that is left to whoever assembles the
    document.
    """

    run_property: RunProperty = field(default_factory=RunProperty)
    children: tuple[RunChild, ...] = ()

    def _append(self, child: RunChild) -> Run:
        return replace(self, children=(*self.children, child))

    def add_text(self, text: str) -> Run:
        return self._append(Text(text))

    def add_delete_text(self, text: str) -> Run:
        return self._append(DeleteText(text))

    def add_tab(self) -> Run:
        return self._append(Tab())

    def add_break(self, break_type: BreakType) -> Run:
        return self._append(Break(break_type))

    def add_drawing(self, drawing: Drawing) -> Run:
        return self._append(drawing)

    def _format(self, run_property: RunProperty) -> Run:
        return replace(self, run_property=run_property)

    def size(self, size: int) -> Run:
        """Set the font size in half-points, for both script classes."""
        return self._format(self.run_property.with_size(size))

    def color(self, color: str) -> Run:
        return self._format(self.run_property.with_color(color))

    def highlight(self, color: str) -> Run:
        return self._format(self.run_property.with_highlight(color))

    def bold(self) -> Run:
        return self._format(self.run_property.with_bold())

    def italic(self) -> Run:
        return self._format(self.run_property.with_italic())

    def underline(self, line_type: str) -> Run:
        return self._format(self.run_property.with_underline(line_type))

    def vanish(self) -> Run:
        return self._format(self.run_property.with_vanish())

    @property
    def text(self) -> str:
        """Visible text of the run; tabs and breaks become whitespace."""
        return "".join(
            _TEXT_STREAM[child.kind](child) for child in self.children if child.kind in _TEXT_STREAM
        )

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        run = make_element("w:r", parent)
        self.run_property.to_element(run)
        for child in self.children:
            child.to_element(run)
        return run

    def to_dict(self) -> dict[str, Any]:
        children = []
        for child in self.children:
            entry: dict[str, Any] = {"type": child.kind.value}
            if child.kind is not RunChildKind.TAB:
                entry["data"] = child.to_dict()
            children.append(entry)
        return {"runProperty": self.run_property.to_dict(), "children": children}
