"""Configuration constants for notes-analyse."""

import os
from pathlib import Path

# Extensions we know how to read headers from.
SUPPORTED_EXTENSIONS: tuple[str, ...] = (".md", ".org")

# Paths containing any of these substrings are never scanned.
DEFAULT_EXCLUDES: tuple[str, ...] = (
    ".git/",
    "node_modules/",
)

WORDS_PER_MINUTE: int = 200

# Seconds to wait for a remote link before calling it dead.
LINK_TIMEOUT: float = 5.0


def resolve_notes_directory() -> Path:
    """Return the directory scanned when no paths are given.

    ``NOTES_DIR`` wins if set, otherwise the current directory (kept
    relative so reported paths stay short).
    """
    env_dir = os.getenv("NOTES_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path(".")


def resolve_max_workers() -> int | None:
    """Return the worker count for per-file scans, or None for the pool default."""
    raw = os.getenv("NOTES_ANALYSE_WORKERS")
    if not raw:
        return None
    try:
        workers = int(raw)
    except ValueError as e:
        msg = f"Invalid NOTES_ANALYSE_WORKERS value {raw!r}: not an integer"
        raise ValueError(msg) from e
    if workers < 1:
        msg = f"Invalid NOTES_ANALYSE_WORKERS value {raw!r}: must be at least 1"
        raise ValueError(msg)
    return workers
