"""OpenXML Writer - build word-processing package parts as typed values.

Elements are immutable values built with chained calls and projected into
the XML the package standard expects.

Example:
    from openxml_writer import BreakType, ContentTypes, DocumentRels, Run

    run = Run().bold().add_text("Hello").add_break(BreakType.PAGE)
    fragment = run.to_xml()

    content_types = ContentTypes().apply_defaults()
    part = content_types.to_xml()

    # Read-modify-write
    content_types = ContentTypes.from_xml(part).add(
        "/word/media/image1.png", "image/png"
    )

    rels = DocumentRels(has_numberings=True).to_xml()
"""

from openxml_writer.errors import (
    ReaderError,
    ReaderIssue,
    ReaderIssueType,
    UnsupportedValueError,
)
from openxml_writer.package import ContentTypes
from openxml_writer.relationships import DocumentRels, PackageRels, Relationship, get_rels_path
from openxml_writer.types import (
    AlignmentType,
    BorderPosition,
    BorderType,
    BreakType,
    VAlignType,
    VMergeType,
)
from openxml_writer.word import (
    Break,
    DeleteText,
    Drawing,
    Paragraph,
    Run,
    RunChildKind,
    RunProperty,
    Tab,
    TableCell,
    TableCellBorder,
    Text,
)

__version__ = "0.1.0"

__all__ = [
    # Package parts
    "ContentTypes",
    "DocumentRels",
    "PackageRels",
    "Relationship",
    "get_rels_path",
    # Elements
    "Run",
    "RunProperty",
    "RunChildKind",
    "Text",
    "DeleteText",
    "Tab",
    "Break",
    "Drawing",
    "Paragraph",
    "TableCell",
    "TableCellBorder",
    # Enums
    "AlignmentType",
    "BorderPosition",
    "BorderType",
    "BreakType",
    "VAlignType",
    "VMergeType",
    # Errors
    "ReaderError",
    "ReaderIssue",
    "ReaderIssueType",
    "UnsupportedValueError",
]
