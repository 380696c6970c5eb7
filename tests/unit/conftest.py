"""Shared test fixtures."""

from pathlib import Path

import pytest

NOTES = {
    "trip.md": (
        "# Intro\n"
        "Packing list @travel @summer\n"
        "## Day 1\n"
        "apple pie\n"
        "## Day 2\n"
        "### Food\n"
        "apple and banana\n"
    ),
    "recipes.org": (
        "* Recipes\n"
        "** Cake\n"
        "** Bread\n"
        "*** Sourdough\n"
        "**** Starter\n"
        "Feed daily @baking\n"
    ),
    "empty.md": "Just an apple, no headers.\n",
    "drafts/idea.md": (
        "## Idea\n"
        "#notaheader\n"
        "  # indented\n"
        "### Sub\n"
        "@travel\n"
    ),
}


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Return a directory holding a small Markdown/Org corpus."""
    root = tmp_path / "notes"
    for name, text in NOTES.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def trip_note(notes_dir: Path) -> Path:
    return notes_dir / "trip.md"
