"""Helpers for reading XML fixtures stored under tests/fixtures."""

from __future__ import annotations

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def fixture_path(*parts: str) -> Path:
    """Path of a fixture file, e.g. fixture_path("content_types", "empty.xml")."""
    return FIXTURES_DIR.joinpath(*parts)


def load_fixture_bytes(*parts: str) -> bytes:
    """Load fixture contents as raw bytes."""
    return fixture_path(*parts).read_bytes()
