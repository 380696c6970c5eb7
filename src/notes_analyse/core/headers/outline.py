"""Render a note's headers as an indented table of contents."""

import io
from collections.abc import Sequence
from itertools import pairwise

from notes_analyse.models.note import SENTINEL_HEADER, Header

SIBLING_MARKER = "├"
LAST_MARKER = "└"


def render_outline(headers: Sequence[Header]) -> list[str]:
    """Render headers as outline lines, one per header.

    Each header is compared with its successor: an equal depth means more
    siblings follow (``├``), anything else closes the run (``└``). The
    sentinel gives the last header a successor of depth 0.
    """
    lines: list[str] = []
    for header, following in pairwise([*headers, SENTINEL_HEADER]):
        marker = SIBLING_MARKER if following.depth == header.depth else LAST_MARKER
        indent = "  " * header.depth
        lines.append(f"{indent}{marker} H{header.depth}: {header.title}")
    return lines


def render_note_outline(name: str, headers: Sequence[Header]) -> str:
    """Render a file name followed by its outline as a single block."""
    out = io.StringIO()
    out.write(f"{name}\n")
    for line in render_outline(headers):
        out.write(f"{line}\n")
    return out.getvalue()
