"""Order and truncate per-file results for reporting."""

from collections.abc import Iterable
from typing import Any

from notes_analyse.models.note import FileScore


def rank(
    results: Iterable[FileScore[Any]],
    *,
    limit: int | None = None,
    reverse: bool = False,
) -> list[FileScore[Any]]:
    """Sort results ascending by value and keep the first ``limit``.

    The sort is stable, so equal values keep their input order. With
    ``reverse`` the whole ascending list is reversed before truncation,
    which makes it the exact mirror of the ascending order.
    """
    ordered = sorted(results, key=lambda r: r.value)
    if reverse:
        ordered.reverse()
    if limit is None:
        return ordered
    return ordered[:limit]
