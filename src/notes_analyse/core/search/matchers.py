"""Title, contents and tag predicates for search queries."""

from pathlib import Path

from notes_analyse.models.note import SearchQuery


def title_matches(path: Path, query: SearchQuery) -> bool:
    """True if any query word or tag appears in the file name (no extension)."""
    stem = path.stem
    return any(word in stem for word in query.all_words)


def contents_match(text: str, query: SearchQuery) -> bool:
    """True if every content word appears in the text.

    A query without content words never matches.
    """
    return bool(query.words) and all(word in text for word in query.words)


def tags_match(file_tags: frozenset[str], query: SearchQuery) -> bool:
    """True if the note carries every queried tag.

    A query without tags never matches.
    """
    return bool(query.tags) and query.tags <= file_tags
