"""Run per-file work on a thread pool and gather the results."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TypeVar

from loguru import logger

from notes_analyse.errors import NoteReadError

T = TypeVar("T")


def map_files(
    func: Callable[[Path], T],
    files: Sequence[Path],
    *,
    default: T,
    max_workers: int | None = None,
) -> list[T]:
    """Apply ``func`` to every file and return results in input order.

    A file whose read fails is logged and contributes ``default`` instead,
    so one unreadable note never hides the rest of the corpus. Any other
    exception propagates once all workers have stopped.
    """

    def run_one(path: Path) -> T:
        try:
            return func(path)
        except NoteReadError as e:
            logger.warning("Skipping {}: {}", path, e)
            return default

    if not files:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(run_one, files))
