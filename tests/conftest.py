"""pytest configuration and fixtures for openxml_writer tests."""

from __future__ import annotations

import pytest

from openxml_writer import BreakType, ContentTypes, Run


@pytest.fixture
def default_content_types() -> ContentTypes:
    """Registry holding the ten parts every package carries."""
    return ContentTypes().apply_defaults()


@pytest.fixture
def styled_run() -> Run:
    """A run using every formatting setter and every non-drawing child."""
    return (
        Run()
        .add_tab()
        .add_text("Hello")
        .add_break(BreakType.PAGE)
        .add_delete_text("deleted")
        .size(30)
        .color("C9211E")
        .highlight("yellow")
        .underline("single")
        .bold()
        .italic()
        .vanish()
    )
