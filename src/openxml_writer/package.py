"""Package content types ([Content_Types].xml).

Every part written into a word-processing package needs a content type. The
writer registers one Override per part path; the registry can be read back
from an existing package for read-modify-write workflows.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import PurePosixPath
from types import MappingProxyType

from lxml import etree

from openxml_writer.namespaces import (
    CONTENT_TYPES,
    CT_COMMENTS,
    CT_CORE_PROPERTIES,
    CT_DOCUMENT,
    CT_EXTENDED_PROPERTIES,
    CT_FONT_TABLE,
    CT_NUMBERING,
    CT_RELATIONSHIPS,
    CT_SETTINGS,
    CT_STYLES,
    qualify_name,
)
from openxml_writer.reader import XmlSource, iter_top_level_elements, local_name
from openxml_writer.xml import check_xml_text, to_part_bytes

logger = logging.getLogger(__name__)

CONTENT_TYPES_PART = "/[Content_Types].xml"

DEFAULT_OVERRIDES = {
    "/_rels/.rels": CT_RELATIONSHIPS,
    "/docProps/app.xml": CT_EXTENDED_PROPERTIES,
    "/docProps/core.xml": CT_CORE_PROPERTIES,
    "/word/_rels/document.xml.rels": CT_RELATIONSHIPS,
    "/word/settings.xml": CT_SETTINGS,
    "/word/fontTable.xml": CT_FONT_TABLE,
    "/word/document.xml": CT_DOCUMENT,
    "/word/styles.xml": CT_STYLES,
    "/word/comments.xml": CT_COMMENTS,
    "/word/numbering.xml": CT_NUMBERING,
}


def normalize_part_name(part_name: str) -> str:
    """Ensure a part name is absolute."""
    if not part_name.startswith("/"):
        part_name = "/" + part_name
    return part_name


def _check_entry(key: str, content_type: str) -> None:
    if not key or not content_type:
        raise ValueError(f"Empty content type entry: {key!r} -> {content_type!r}")
    check_xml_text(key, "part name or extension")
    check_xml_text(content_type, "content type")


@dataclass(frozen=True, eq=True)
class ContentTypes:
    """Content types of a package, keyed by part path.

    Instances are immutable and hashable; ``add`` and friends return a new
    registry. Part names, extensions and content types must be non-empty
    strings that XML can carry.
    """

    overrides: Mapping[str, str] = field(default_factory=dict)  # part_name -> content_type
    defaults: Mapping[str, str] = field(default_factory=dict)  # extension -> content_type

    def __post_init__(self) -> None:
        for name in ("overrides", "defaults"):
            entries = dict(getattr(self, name))
            for key, value in entries.items():
                _check_entry(key, value)
            object.__setattr__(self, name, MappingProxyType(entries))

    def __hash__(self) -> int:
        return hash((frozenset(self.overrides.items()), frozenset(self.defaults.items())))

    def add(self, part_name: str, content_type: str) -> ContentTypes:
        """Register the content type of one part. The last write for a path wins."""
        overrides = dict(self.overrides)
        overrides[normalize_part_name(part_name)] = content_type
        return replace(self, overrides=overrides)

    def add_default(self, extension: str, content_type: str) -> ContentTypes:
        """Register an extension-based fallback content type."""
        defaults = dict(self.defaults)
        defaults[extension.lstrip(".").lower()] = content_type
        return replace(self, defaults=defaults)

    def apply_defaults(self) -> ContentTypes:
        """Register the parts every word-processing package carries.

        Existing entries at those paths are overwritten.
        """
        return replace(self, overrides={**self.overrides, **DEFAULT_OVERRIDES})

    def get_content_type(self, part_name: str) -> str | None:
        """Get the content type for a part.

        First checks overrides, then falls back to extension-based defaults.
        """
        part_name = normalize_part_name(part_name)

        if part_name in self.overrides:
            return self.overrides[part_name]

        ext = PurePosixPath(part_name).suffix.lstrip(".").lower()
        return self.defaults.get(ext)

    def __len__(self) -> int:
        return len(self.overrides)

    def __contains__(self, part_name: str) -> bool:
        return normalize_part_name(part_name) in self.overrides

    def to_element(self) -> etree._Element:
        """Build the <Types> root with entries in canonical order."""
        root = etree.Element(qualify_name("Types", CONTENT_TYPES), nsmap={None: CONTENT_TYPES})

        for extension in sorted(self.defaults):
            default = etree.SubElement(root, qualify_name("Default", CONTENT_TYPES))
            default.set("Extension", extension)
            default.set("ContentType", self.defaults[extension])

        # Attribute order is fixed: ContentType, then PartName.
        for part_name in sorted(self.overrides):
            override = etree.SubElement(root, qualify_name("Override", CONTENT_TYPES))
            override.set("ContentType", self.overrides[part_name])
            override.set("PartName", part_name)

        return root

    def to_xml(self) -> bytes:
        """Serialize [Content_Types].xml."""
        return to_part_bytes(self.to_element())

    @classmethod
    def from_xml(cls, xml_content: XmlSource) -> ContentTypes:
        """Parse [Content_Types].xml content.

        Raises:
            ReaderError: If the part cannot be read to completion.
        """
        ct = cls()

        for element in iter_top_level_elements(xml_content, CONTENT_TYPES_PART):
            name = local_name(element.tag)
            content_type = element.get("ContentType", "")

            if name == "Override":
                part_name = element.get("PartName", "")
                if part_name and content_type:
                    ct = ct.add(part_name, content_type)
                    continue
            elif name == "Default":
                ext = element.get("Extension", "")
                if ext and content_type:
                    ct = ct.add_default(ext, content_type)
                    continue

            logger.debug("Skipping <%s> in %s", name, CONTENT_TYPES_PART)

        return ct
