"""Protocols for the collaborators the analysis core depends on."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from notes_analyse.models.note import Link


@runtime_checkable
class TagSourceProtocol(Protocol):
    """Protocol for looking up the tags declared by a note."""

    def tags_for(self, path: Path) -> frozenset[str]:
        """Return the note's tags, or an empty set if it declares none."""
        ...


@runtime_checkable
class LinkCheckerProtocol(Protocol):
    """Protocol for deciding whether a link still resolves."""

    def is_alive(self, link: Link) -> bool:
        """Return True if the link target can be reached."""
        ...
