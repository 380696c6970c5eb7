"""Resolve command-line paths into the list of notes to analyse."""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from notes_analyse.config import SUPPORTED_EXTENSIONS


def is_excluded(path: Path, excludes: Iterable[str]) -> bool:
    """True if the path contains any exclude pattern as a substring."""
    name = path.as_posix()
    return any(pattern in name for pattern in excludes)


def discover_note_files(
    paths: Iterable[Path],
    *,
    excludes: Iterable[str] = (),
    extensions: tuple[str, ...] = SUPPORTED_EXTENSIONS,
) -> list[Path]:
    """Expand files and directories into a sorted list of note files.

    Directories are searched recursively for ``extensions``. Explicit files
    with another extension are skipped with a warning, so every returned
    path has a known header dialect.
    """
    excludes = tuple(excludes)
    found: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = [p for ext in extensions for p in path.rglob(f"*{ext}") if p.is_file()]
        elif path.suffix in extensions:
            if not path.exists():
                logger.warning("No such note: {}", path)
                continue
            candidates = [path]
        else:
            logger.warning("Skipping {}: unsupported extension", path)
            continue
        found.update(p for p in candidates if not is_excluded(p, excludes))

    notes = sorted(found)
    logger.debug("Discovered {} notes", len(notes))
    return notes
