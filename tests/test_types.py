"""Tests for closed vocabularies."""

from __future__ import annotations

import pytest

from openxml_writer.errors import UnsupportedValueError
from openxml_writer.types import (
    AlignmentType,
    BorderPosition,
    BorderType,
    BreakType,
    VAlignType,
    VMergeType,
    WireEnum,
)

VOCABULARIES = [AlignmentType, BorderPosition, BorderType, BreakType, VAlignType, VMergeType]


class TestWireStrings:
    """Tests for the member to wire string mapping."""

    @pytest.mark.parametrize("vocabulary", VOCABULARIES)
    def test_every_member_has_wire_string(self, vocabulary: type[WireEnum]) -> None:
        """Test each member maps to a distinct non-empty string that is not its own name."""
        values = [member.value for member in vocabulary]
        assert all(isinstance(value, str) and value for value in values)
        assert len(set(values)) == len(values)
        assert all(member.value != member.name for member in vocabulary)

    @pytest.mark.parametrize("vocabulary", VOCABULARIES)
    def test_str_is_wire_string(self, vocabulary: type[WireEnum]) -> None:
        """Test str() of a member gives its wire string."""
        for member in vocabulary:
            assert str(member) == member.value

    def test_border_type_values(self) -> None:
        """Test the modeled border styles."""
        assert BorderType.DOT_DOT_DASH.value == "dotDotDash"
        assert BorderType.DOT_DASH.value == "dotDash"
        assert [b.value for b in BorderType] == [
            "none",
            "single",
            "thick",
            "double",
            "dotted",
            "dashed",
            "dotDash",
            "dotDotDash",
            "triple",
        ]

    def test_justified_alignment(self) -> None:
        """Test justified alignment uses the schema name."""
        assert AlignmentType.JUSTIFIED.value == "both"

    def test_break_types(self) -> None:
        """Test break type wire strings."""
        assert BreakType.TEXT_WRAPPING.value == "textWrapping"


class TestFromWire:
    """Tests for reading wire strings back into members."""

    @pytest.mark.parametrize("vocabulary", VOCABULARIES)
    def test_every_member_readable(self, vocabulary: type[WireEnum]) -> None:
        """Test from_wire accepts every modeled value."""
        for member in vocabulary:
            assert vocabulary.from_wire(member.value) is member

    @pytest.mark.parametrize("value", ["wave", "thinThickSmallGap", "apples", "nil"])
    def test_unmodeled_border_rejected(self, value: str) -> None:
        """Test legal but unmodeled border styles are unsupported."""
        with pytest.raises(UnsupportedValueError) as exc_info:
            BorderType.from_wire(value)

        assert exc_info.value.vocabulary == "BorderType"
        assert exc_info.value.value == value
        assert value in str(exc_info.value)

    def test_case_sensitive(self) -> None:
        """Test a near miss in case is not coerced."""
        with pytest.raises(UnsupportedValueError):
            BorderType.from_wire("DotDotDash")

    def test_unsupported_is_value_error(self) -> None:
        """Test callers can catch the condition as ValueError."""
        with pytest.raises(ValueError):
            VMergeType.from_wire("merge")
