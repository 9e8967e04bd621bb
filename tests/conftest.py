"""Shared fixtures for all tests."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def final_sheet() -> str:
    """A fighter sheet whose derived fields are all up to date."""
    return (DATA_DIR / "dnd35-fighter-1.final.yaml").read_text(encoding="utf-8")


@pytest.fixture
def stale_sheet() -> str:
    """The same fighter, hand-edited: stale derived fields and block styles."""
    return (DATA_DIR / "dnd35-fighter-1.stale.yaml").read_text(encoding="utf-8")


@pytest.fixture
def minimal_sheet() -> str:
    """A sheet with a single strength entry."""
    return "---\ncharacter:\n  abilities:\n    strength: [15, str: 2, { base: 11, orc: 2, hd: 2 }]\n"
