"""Extract headers from Markdown and Org notes."""

import re
from pathlib import Path

from notes_analyse.core.reader import read_note
from notes_analyse.errors import UnsupportedDialectError
from notes_analyse.models.note import Header

# Extension -> character repeated at the start of a header line.
HEADER_MARKERS: dict[str, str] = {
    ".md": "#",
    ".org": "*",
}

_LEADING_TOKEN = re.compile(r"\S*")


def dialect_for_path(path: Path) -> str:
    """Return the header marker for a note's extension."""
    try:
        return HEADER_MARKERS[path.suffix]
    except KeyError:
        msg = f"No header dialect for {path.suffix or '<no extension>'!r} ({path})"
        raise UnsupportedDialectError(msg) from None


def parse_headers(text: str, marker: str) -> tuple[Header, ...]:
    """Return the headers of ``text`` in document order.

    A line is a header iff its leading non-whitespace token is made up only
    of ``marker``; ``##foo`` and indented ``  ## foo`` are plain text.
    """
    headers: list[Header] = []
    # Only "\n" (and "\r\n") end a line; form feeds and other Unicode
    # separators stay inside it.
    for raw_line in text.split("\n"):
        line = raw_line.removesuffix("\r")
        token = _LEADING_TOKEN.match(line).group()  # type: ignore[union-attr]
        if not token or token.strip(marker):
            continue
        headers.append(Header(title=line[len(token) :].strip(), depth=len(token)))
    return tuple(headers)


def extract_headers(path: Path) -> tuple[Header, ...]:
    """Read a note and return its headers.

    Raises:
        UnsupportedDialectError: the extension has no header marker.
        NoteReadError: the file cannot be read or is not UTF-8.
    """
    marker = dialect_for_path(path)
    return parse_headers(read_note(path), marker)
