"""Required/forbidden tag queries."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TagFilter:
    """Match a note's tag set against required and forbidden tags.

    An empty ``required`` set matches no note at all; it is not treated as
    "any tags". With ``match_any`` a single required tag is enough instead
    of all of them.
    """

    required: frozenset[str]
    forbidden: frozenset[str] = frozenset()
    match_any: bool = False

    @classmethod
    def from_lists(
        cls,
        required: Iterable[str],
        forbidden: Iterable[str] = (),
        *,
        match_any: bool = False,
    ) -> "TagFilter":
        return cls(
            required=frozenset(t.removeprefix("@") for t in required),
            forbidden=frozenset(t.removeprefix("@") for t in forbidden),
            match_any=match_any,
        )

    def matches(self, file_tags: frozenset[str]) -> bool:
        if not self.required:
            return False
        if self.forbidden & file_tags:
            return False
        if self.match_any:
            return bool(self.required & file_tags)
        return self.required <= file_tags


def is_untagged(file_tags: frozenset[str]) -> bool:
    return not file_tags
