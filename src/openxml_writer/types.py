"""Closed vocabularies for schema-constrained attributes.

Each enumeration models a subset of the matching ECMA-376 simple type. Member
values are the exact wire strings; values the standard allows but the
enumeration does not model are rejected with UnsupportedValueError.
"""

from __future__ import annotations

from enum import Enum

from openxml_writer.errors import UnsupportedValueError


class WireEnum(Enum):
    """Base for enumerations whose values are serialized verbatim."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, value: str) -> WireEnum:
        """Look up the member for a wire string.

        Raises:
            UnsupportedValueError: If the value is not modeled. Matching is
                case-sensitive and never falls back to a near member.
        """
        for member in cls:
            if member.value == value:
                return member
        raise UnsupportedValueError(cls.__name__, value, [m.value for m in cls])


class BorderType(WireEnum):
    """ST_Border (17.18.2).

    Not modeled: nil, the wave/gap/3D line styles and all art borders.
    """

    NONE = "none"
    SINGLE = "single"
    THICK = "thick"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOT_DASH = "dotDash"
    DOT_DOT_DASH = "dotDotDash"
    TRIPLE = "triple"


class BreakType(WireEnum):
    """ST_BrType (17.18.4)."""

    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


class AlignmentType(WireEnum):
    """ST_Jc (17.18.44), transitional names only."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    JUSTIFIED = "both"


class VMergeType(WireEnum):
    """ST_Merge (17.18.57)."""

    RESTART = "restart"
    CONTINUE = "continue"


class VAlignType(WireEnum):
    """ST_VerticalJc (17.18.101), without ``both``."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class BorderPosition(WireEnum):
    """Child elements of CT_TcBorders, in schema order."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"
    INSIDE_H = "insideH"
    INSIDE_V = "insideV"
