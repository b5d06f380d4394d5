"""Relationship parts for word-processing packages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import PurePosixPath

from lxml import etree

from openxml_writer.namespaces import (
    REL_COMMENTS,
    REL_CORE_PROPERTIES,
    REL_EXTENDED_PROPERTIES,
    REL_FONT_TABLE,
    REL_NUMBERING,
    REL_OFFICE_DOCUMENT,
    REL_SETTINGS,
    REL_STYLES,
    RELATIONSHIPS,
    qualify_name,
)
from openxml_writer.reader import XmlSource, iter_top_level_elements, local_name
from openxml_writer.xml import check_xml_text, to_part_bytes

logger = logging.getLogger(__name__)


def get_rels_path(part_uri: str) -> str:
    """Get the relationships part that belongs to a source part.

    The package itself (``"/"``) owns ``/_rels/.rels``; any other part owns
    ``_rels/<name>.rels`` beside it, e.g. ``/word/document.xml`` owns
    ``/word/_rels/document.xml.rels``.
    """
    if part_uri == "/":
        return "/_rels/.rels"

    path = PurePosixPath(part_uri)
    return str(path.parent / "_rels" / f"{path.name}.rels")


@dataclass(frozen=True)
class Relationship:
    """An OPC relationship between parts."""

    id: str  # Relationship ID (e.g., "rId1")
    type: str  # Relationship type URI
    target: str  # Target path, relative to the source part
    target_mode: str = "Internal"  # "Internal" or "External"

    def __post_init__(self) -> None:
        for name in ("id", "type", "target", "target_mode"):
            check_xml_text(getattr(self, name), name)

    @property
    def is_external(self) -> bool:
        """Check if this is an external relationship."""
        return self.target_mode == "External"


def build_relationships_xml(relationships: list[Relationship]) -> bytes:
    """Serialize a relationships part, one entry per relationship in order."""
    root = etree.Element(qualify_name("Relationships", RELATIONSHIPS), nsmap={None: RELATIONSHIPS})

    for rel in relationships:
        elem = etree.SubElement(root, qualify_name("Relationship", RELATIONSHIPS))
        elem.set("Id", rel.id)
        elem.set("Type", rel.type)
        elem.set("Target", rel.target)
        if rel.is_external:
            elem.set("TargetMode", rel.target_mode)

    return to_part_bytes(root)


def parse_relationships_xml(xml_content: XmlSource, part_name: str = "") -> list[Relationship]:
    """Read the relationships listed in a relationships part.

    Raises:
        ReaderError: If the part cannot be read to completion.
    """
    relationships = []

    for elem in iter_top_level_elements(xml_content, part_name):
        rel_id = elem.get("Id", "")
        rel_type = elem.get("Type", "")
        if local_name(elem.tag) != "Relationship" or not rel_id or not rel_type:
            logger.debug("Skipping <%s> in %s", local_name(elem.tag), part_name or "relationships")
            continue
        relationships.append(
            Relationship(
                id=rel_id,
                type=rel_type,
                target=elem.get("Target", ""),
                target_mode=elem.get("TargetMode", "Internal"),
            )
        )

    return relationships


# (flag, id, type, target); ids are bound to slots and never compacted.
_DOCUMENT_RELATIONSHIP_SLOTS = (
    (None, "rId1", REL_STYLES, "styles.xml"),
    (None, "rId2", REL_FONT_TABLE, "fontTable.xml"),
    (None, "rId3", REL_SETTINGS, "settings.xml"),
    ("has_comments", "rId4", REL_COMMENTS, "comments.xml"),
    ("has_numberings", "rId5", REL_NUMBERING, "numbering.xml"),
)


@dataclass(frozen=True)
class DocumentRels:
    """Relationships of the main document part (word/_rels/document.xml.rels)."""

    has_comments: bool = False
    has_numberings: bool = False

    PART_NAME = get_rels_path("/word/document.xml")

    def with_comments(self, has_comments: bool = True) -> DocumentRels:
        return replace(self, has_comments=has_comments)

    def with_numberings(self, has_numberings: bool = True) -> DocumentRels:
        return replace(self, has_numberings=has_numberings)

    def relationships(self) -> list[Relationship]:
        """Get the relationships this part declares, in fixed slot order."""
        return [
            Relationship(id=rel_id, type=rel_type, target=target)
            for flag, rel_id, rel_type, target in _DOCUMENT_RELATIONSHIP_SLOTS
            if flag is None or getattr(self, flag)
        ]

    def to_xml(self) -> bytes:
        return build_relationships_xml(self.relationships())

    @classmethod
    def from_xml(cls, xml_content: XmlSource) -> DocumentRels:
        """Recover the optional-part flags from an existing relationships part."""
        types = {rel.type for rel in parse_relationships_xml(xml_content, cls.PART_NAME)}
        return cls(
            has_comments=REL_COMMENTS in types,
            has_numberings=REL_NUMBERING in types,
        )


@dataclass(frozen=True)
class PackageRels:
    """Package-level relationships (_rels/.rels)."""

    PART_NAME = get_rels_path("/")

    def relationships(self) -> list[Relationship]:
        return [
            Relationship(id="rId1", type=REL_CORE_PROPERTIES, target="docProps/core.xml"),
            Relationship(id="rId2", type=REL_EXTENDED_PROPERTIES, target="docProps/app.xml"),
            Relationship(id="rId3", type=REL_OFFICE_DOCUMENT, target="word/document.xml"),
        ]

    def to_xml(self) -> bytes:
        return build_relationships_xml(self.relationships())

