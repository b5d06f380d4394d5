"""Open XML namespaces and fixed wire literals.

Based on ECMA-376 Part 2 (OPC) and Part 1 (WordprocessingML).
"""

# Content Types namespace
CONTENT_TYPES = "http://schemas.openxmlformats.org/package/2006/content-types"

# Relationships namespace (package level)
RELATIONSHIPS = "http://schemas.openxmlformats.org/package/2006/relationships"

# Package relationship types
REL_CORE_PROPERTIES = (
    "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties"
)
REL_OFFICE_DOCUMENT = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument"
)
REL_EXTENDED_PROPERTIES = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/extended-properties"
)

# Document relationship types
REL_STYLES = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles"
REL_FONT_TABLE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/fontTable"
REL_SETTINGS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/settings"
REL_COMMENTS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/comments"
REL_NUMBERING = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/numbering"

# WordprocessingML namespace
WORDPROCESSINGML = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

# DrawingML namespaces
DRAWINGML = "http://schemas.openxmlformats.org/drawingml/2006/main"
DRAWINGML_PICTURE = "http://schemas.openxmlformats.org/drawingml/2006/picture"
DRAWINGML_WORDPROCESSING = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"

# Office Document relationships (r:id, r:embed attributes)
OFFICE_DOC_RELATIONSHIPS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

# XML standard namespace
XML = "http://www.w3.org/XML/1998/namespace"

# Content types of the parts every word-processing package carries
CT_RELATIONSHIPS = "application/vnd.openxmlformats-package.relationships+xml"
CT_CORE_PROPERTIES = "application/vnd.openxmlformats-package.core-properties+xml"
CT_EXTENDED_PROPERTIES = "application/vnd.openxmlformats-officedocument.extended-properties+xml"
CT_DOCUMENT = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
CT_STYLES = "application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml"
CT_SETTINGS = "application/vnd.openxmlformats-officedocument.wordprocessingml.settings+xml"
CT_FONT_TABLE = "application/vnd.openxmlformats-officedocument.wordprocessingml.fontTable+xml"
CT_COMMENTS = "application/vnd.openxmlformats-officedocument.wordprocessingml.comments+xml"
CT_NUMBERING = "application/vnd.openxmlformats-officedocument.wordprocessingml.numbering+xml"

# Namespace prefix map for lxml
NSMAP = {
    "w": WORDPROCESSINGML,
    "wp": DRAWINGML_WORDPROCESSING,
    "a": DRAWINGML,
    "pic": DRAWINGML_PICTURE,
    "r": OFFICE_DOC_RELATIONSHIPS,
    "xml": XML,
}


def qualify_name(local_name: str, namespace: str) -> str:
    """Create a Clark notation qualified name {namespace}local_name."""
    return f"{{{namespace}}}{local_name}"


def qn(prefixed_name: str) -> str:
    """Turn a prefixed name such as ``w:rPr`` into Clark notation.

    Names without a prefix are returned unchanged.
    """
    prefix, sep, local_name = prefixed_name.partition(":")
    if not sep:
        return prefixed_name
    return qualify_name(local_name, NSMAP[prefix])

