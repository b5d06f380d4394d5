"""Tests for paragraphs and table cells built from runs."""

from __future__ import annotations

from openxml_writer import (
    AlignmentType,
    BorderPosition,
    BorderType,
    BreakType,
    Drawing,
    Paragraph,
    Run,
    TableCell,
    TableCellBorder,
    VAlignType,
    VMergeType,
)
from openxml_writer.namespaces import WORDPROCESSINGML
from tests.xml_helpers import local_tags, w


class TestParagraph:
    """Tests for Paragraph."""

    def test_empty_paragraph(self) -> None:
        """Test pPr is always emitted."""
        assert Paragraph().to_xml() == (
            f'<w:p xmlns:w="{WORDPROCESSINGML}"><w:pPr/></w:p>'
        ).encode()

    def test_properties_and_runs(self) -> None:
        """Test property order and run placement."""
        paragraph = (
            Paragraph()
            .add_run(Run().add_text("Title"))
            .align(AlignmentType.CENTER)
            .style("Heading1")
            .add_run(Run().bold().add_text("!"))
        )
        element = paragraph.to_element()

        assert local_tags(element) == ["pPr", "r", "r"]
        assert local_tags(element.find(w("pPr"))) == ["pStyle", "jc"]
        assert element.find(f"{w('pPr')}/{w('jc')}").get(w("val")) == "center"
        assert paragraph.text == "Title!"

    def test_view(self) -> None:
        """Test the host-facing view lists runs as tagged children."""
        view = Paragraph().align(AlignmentType.JUSTIFIED).add_run(Run().add_tab()).to_dict()
        assert view == {
            "property": {"style": None, "alignment": "both"},
            "children": [
                {
                    "type": "run",
                    "data": Run().add_tab().to_dict(),
                }
            ],
        }

    def test_drawing_namespaces(self) -> None:
        """Test a picture inside a paragraph serializes with all its namespaces."""
        xml = Paragraph().add_run(Run().add_drawing(Drawing("rId4", 10, 10, id=1))).to_xml()
        assert b'xmlns:pic="http://schemas.openxmlformats.org/drawingml/2006/picture"' in xml
        assert b'r:embed="rId4"' in xml
        assert b"ns0:" not in xml


class TestTableCell:
    """Tests for TableCell."""

    def test_property_order(self) -> None:
        """Test tcPr children follow the schema sequence whatever the setter order."""
        cell = (
            TableCell()
            .vertical_align(VAlignType.CENTER)
            .border(TableCellBorder(BorderPosition.BOTTOM, BorderType.DOUBLE))
            .vertical_merge(VMergeType.RESTART)
            .grid_span(2)
            .width(2400)
            .add_paragraph(Paragraph().add_run(Run().add_text("x")))
        )
        element = cell.to_element()

        assert local_tags(element) == ["tcPr", "p"]
        assert local_tags(element.find(w("tcPr"))) == [
            "tcW",
            "gridSpan",
            "vMerge",
            "tcBorders",
            "vAlign",
        ]
        tc_w = element.find(f"{w('tcPr')}/{w('tcW')}")
        assert tc_w.get(w("w")) == "2400"
        assert tc_w.get(w("type")) == "dxa"

    def test_border_order_and_replacement(self) -> None:
        """Test borders are written in position order and replaced per edge."""
        cell = (
            TableCell()
            .border(TableCellBorder(BorderPosition.INSIDE_V))
            .border(TableCellBorder(BorderPosition.TOP, BorderType.DASHED))
            .border(TableCellBorder(BorderPosition.LEFT))
            .border(TableCellBorder(BorderPosition.TOP, BorderType.DOT_DOT_DASH, size=8))
        )
        borders = cell.to_element().find(f"{w('tcPr')}/{w('tcBorders')}")

        assert local_tags(borders) == ["top", "left", "insideV"]
        top = borders[0]
        assert top.get(w("val")) == "dotDotDash"
        assert top.get(w("sz")) == "8"
        assert top.get(w("space")) == "0"
        assert top.get(w("color")) == "000000"

    def test_empty_cell(self) -> None:
        """Test an empty cell still carries tcPr."""
        assert local_tags(TableCell().to_element()) == ["tcPr"]

    def test_view(self) -> None:
        """Test the host-facing view omits unset properties."""
        paragraph = Paragraph().add_run(Run().add_break(BreakType.PAGE))
        view = TableCell().grid_span(3).vertical_merge(VMergeType.CONTINUE).add_paragraph(
            paragraph
        ).to_dict()

        assert view == {
            "children": [{"type": "paragraph", "data": paragraph.to_dict()}],
            "property": {"verticalMerge": "continue", "gridSpan": 3},
        }

    def test_value_semantics(self) -> None:
        """Test builders leave the original cell unchanged."""
        base = TableCell()
        merged = base.vertical_merge(VMergeType.RESTART)
        assert base.cell_property.vertical_merge is None
        assert merged.cell_property.vertical_merge is VMergeType.RESTART

    def test_namespace_declared_once(self) -> None:
        """Test nested runs reuse the cell's namespace declaration."""
        cell = TableCell().add_paragraph(Paragraph().add_run(Run().bold().add_text("x")))
        assert cell.to_xml().count(b"xmlns:w=") == 1
