"""Domain models for note analysis."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")

MATCH_TITLE = "title"
MATCH_CONTENTS = "contents"
MATCH_TAGS = "tags"


@dataclass(frozen=True)
class Header:
    """A single header line: its text and nesting depth."""

    title: str
    depth: int


# Appended after the last real header so every header has a successor.
SENTINEL_HEADER = Header(title="", depth=0)


@dataclass(frozen=True)
class SearchQuery:
    """Search tokens split into content words and ``@``-prefixed tags."""

    words: frozenset[str] = frozenset()
    tags: frozenset[str] = frozenset()

    @classmethod
    def from_tokens(cls, tokens: list[str] | tuple[str, ...]) -> "SearchQuery":
        words = frozenset(t for t in tokens if not t.startswith("@"))
        tags = frozenset(t[1:] for t in tokens if t.startswith("@"))
        return cls(words=words, tags=tags)

    @property
    def all_words(self) -> frozenset[str]:
        return self.words | self.tags


@dataclass(frozen=True)
class FileScore(Generic[T]):
    """A per-file result with the value it is ranked by."""

    value: T
    path: Path


class LinkType(Enum):
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class Link:
    """A link found in a note."""

    text: str
    target: str
    source: Path
    linktype: LinkType
