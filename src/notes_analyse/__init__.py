"""Structural analysis, search and tag queries over Markdown and Org notes."""

from notes_analyse.core.analysis.scoring import complexity_score, header_count
from notes_analyse.core.headers.extractor import extract_headers, parse_headers
from notes_analyse.core.headers.outline import render_outline
from notes_analyse.core.search.note_filter import NoteFilter
from notes_analyse.core.tags.tag_filter import TagFilter
from notes_analyse.models.note import Header, SearchQuery

__all__ = [
    "Header",
    "NoteFilter",
    "SearchQuery",
    "TagFilter",
    "complexity_score",
    "extract_headers",
    "header_count",
    "parse_headers",
    "render_outline",
]
