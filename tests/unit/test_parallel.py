"""Tests for the per-file worker pool."""

from pathlib import Path

import pytest

from notes_analyse.core.headers.extractor import extract_headers
from notes_analyse.core.parallel import map_files
from notes_analyse.errors import NoteReadError, UnsupportedDialectError


def test_map_files_preserves_input_order(tmp_path: Path) -> None:
    files = [tmp_path / f"{i}.md" for i in range(20)]
    result = map_files(lambda p: p.stem, files, default="", max_workers=4)
    assert result == [str(i) for i in range(20)]


def test_map_files_substitutes_default_for_unreadable(notes_dir: Path) -> None:
    files = [notes_dir / "trip.md", notes_dir / "missing.md"]
    result = map_files(extract_headers, files, default=())
    assert len(result[0]) == 4
    assert result[1] == ()


def test_map_files_propagates_contract_violations(tmp_path: Path) -> None:
    with pytest.raises(UnsupportedDialectError):
        map_files(extract_headers, [tmp_path / "notes.txt"], default=())


def test_map_files_propagates_unexpected_errors(tmp_path: Path) -> None:
    def boom(_path: Path) -> int:
        msg = "boom"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="boom"):
        map_files(boom, [tmp_path / "a.md"], default=0)


def test_map_files_handles_read_error_subclasses(tmp_path: Path) -> None:
    def unreadable(path: Path) -> int:
        msg = f"Cannot read {path}"
        raise NoteReadError(msg)

    assert map_files(unreadable, [tmp_path / "a.md", tmp_path / "b.md"], default=-1) == [-1, -1]


def test_map_files_empty_input() -> None:
    assert map_files(len, [], default=0) == []
