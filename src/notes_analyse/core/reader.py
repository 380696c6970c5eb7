"""Read note files, mapping OS and decoding failures to note errors."""

from pathlib import Path

from notes_analyse.errors import NoteEncodingError, NoteReadError


def read_note(path: Path) -> str:
    """Return the full UTF-8 text of a note."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"{path} is not valid UTF-8: {e.reason}"
        raise NoteEncodingError(msg) from e
    except OSError as e:
        msg = f"Cannot read {path}: {e.strerror or e}"
        raise NoteReadError(msg) from e


def note_size(path: Path) -> int:
    """Return the size of a note in bytes."""
    try:
        return path.stat().st_size
    except OSError as e:
        msg = f"Cannot stat {path}: {e.strerror or e}"
        raise NoteReadError(msg) from e
