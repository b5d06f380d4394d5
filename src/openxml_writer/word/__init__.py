"""WordprocessingML body elements."""

from openxml_writer.word.drawing import Drawing
from openxml_writer.word.paragraph import Paragraph, ParagraphProperty
from openxml_writer.word.run import Run, RunChild
from openxml_writer.word.run_property import RunProperty
from openxml_writer.word.table_cell import TableCell, TableCellBorder, TableCellProperty
from openxml_writer.word.text import Break, DeleteText, RunChildKind, Tab, Text

__all__ = [
    "Break",
    "DeleteText",
    "Drawing",
    "Paragraph",
    "ParagraphProperty",
    "Run",
    "RunChild",
    "RunChildKind",
    "RunProperty",
    "Tab",
    "TableCell",
    "TableCellBorder",
    "TableCellProperty",
    "Text",
]
