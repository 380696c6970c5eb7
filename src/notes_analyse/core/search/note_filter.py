"""Combine the attribute matchers into a per-note search result."""

from pathlib import Path

from notes_analyse.core.reader import read_note
from notes_analyse.core.search.matchers import contents_match, tags_match, title_matches
from notes_analyse.core.tags.extractor import parse_tags
from notes_analyse.models.note import MATCH_CONTENTS, MATCH_TAGS, MATCH_TITLE, SearchQuery
from notes_analyse.protocols import TagSourceProtocol

# Report column per category, in display order.
_FLAGS = ((MATCH_TITLE, "T"), (MATCH_TAGS, "t"), (MATCH_CONTENTS, "c"))


class NoteFilter:
    """Decide which attributes of a note satisfy a search query."""

    def __init__(self, query: SearchQuery, tag_source: TagSourceProtocol | None = None) -> None:
        self.query = query
        self.tag_source = tag_source

    @classmethod
    def from_tokens(
        cls, tokens: list[str], tag_source: TagSourceProtocol | None = None
    ) -> "NoteFilter":
        return cls(SearchQuery.from_tokens(tokens), tag_source)

    def _tags_for(self, path: Path, text: str) -> frozenset[str]:
        if self.tag_source is None:
            return parse_tags(text)
        return self.tag_source.tags_for(path)

    def matches(self, path: Path) -> frozenset[str]:
        """Return the names of the categories the note matched.

        Reads the note once; an empty set means no match.
        """
        text = read_note(path)
        results = {
            MATCH_TITLE: title_matches(path, self.query),
            MATCH_CONTENTS: contents_match(text, self.query),
            MATCH_TAGS: tags_match(self._tags_for(path, text), self.query),
        }
        return frozenset(name for name, matched in results.items() if matched)

    def word_frequency(self, text: str) -> int:
        """Total occurrences of the content words, or 0 if any word is missing."""
        counts = [text.count(word) for word in self.query.words]
        if not counts or not all(counts):
            return 0
        return sum(counts)

    def frequency(self, path: Path) -> int:
        return self.word_frequency(read_note(path))


def format_match_flags(matches: frozenset[str]) -> str:
    """Render matched categories as a fixed-width ``Ttc`` column."""
    return "".join(flag if name in matches else " " for name, flag in _FLAGS)
