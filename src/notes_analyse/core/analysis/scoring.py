"""Per-note structural and size statistics."""

import math
from collections.abc import Sequence

from notes_analyse.config import WORDS_PER_MINUTE
from notes_analyse.models.note import Header

# Keeps the mean defined for notes without headers.
_EPSILON = 1e-9


def complexity_score(headers: Sequence[Header]) -> float:
    """Mean header depth; a note without headers scores ~0.0."""
    total = sum(h.depth for h in headers)
    return total / (len(headers) + _EPSILON)


def header_count(headers: Sequence[Header]) -> int:
    return len(headers)


def word_count(text: str) -> int:
    return len(text.split())


def reading_minutes(words: int, *, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Whole minutes needed to read ``words`` words, rounded up."""
    return math.ceil(words / words_per_minute)


def size_in_kb(nbytes: int) -> float:
    return nbytes / 1024
