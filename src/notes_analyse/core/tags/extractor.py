"""Read ``@tag`` declarations from note text."""

import re
from pathlib import Path

from notes_analyse.core.reader import read_note

# "@" at line start or after whitespace, then a letter or digit.
TAG_PATTERN = re.compile(r"(?:^|(?<=\s))@([^\W_][\w-]*)", re.MULTILINE)


def parse_tags(text: str) -> frozenset[str]:
    """Return every tag declared in ``text``, without the ``@``."""
    return frozenset(TAG_PATTERN.findall(text))


class InlineTagSource:
    """Tag source reading ``@tag`` tokens from the note itself."""

    def tags_for(self, path: Path) -> frozenset[str]:
        return parse_tags(read_note(path))


def format_tags(tags: frozenset[str]) -> str:
    return ", ".join(f"@{t}" for t in sorted(tags))
