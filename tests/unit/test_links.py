"""Tests for link extraction and liveness checks."""

import threading
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from notes_analyse.core.links.checker import LinkChecker, find_broken_links, parse_links
from notes_analyse.models.note import Link, LinkType
from tests.unit.fakes import FakeLinkChecker

SOURCE = Path("/notes/index.md")


def _link(target: str, linktype: LinkType = LinkType.LOCAL, source: Path = SOURCE) -> Link:
    return Link(text=target, target=target, source=source, linktype=linktype)


def test_parse_links_markdown_and_org_in_order() -> None:
    text = "See [[other.org][Other]] then [docs](https://example.com) and [[plain.md]]."
    links = parse_links(text, SOURCE)
    assert [(lnk.text, lnk.target, lnk.linktype) for lnk in links] == [
        ("Other", "other.org", LinkType.LOCAL),
        ("docs", "https://example.com", LinkType.REMOTE),
        ("plain.md", "plain.md", LinkType.LOCAL),
    ]


def test_parse_links_markdown_title_is_ignored() -> None:
    links = parse_links('[a](b.md "A title")', SOURCE)
    assert links[0].target == "b.md"


def test_local_link_resolves_relative_to_note(tmp_path: Path) -> None:
    note = tmp_path / "index.md"
    (tmp_path / "exists.md").write_text("hi")
    checker = LinkChecker()
    assert checker.is_alive(_link("exists.md", source=note))
    assert checker.is_alive(_link("exists.md#section", source=note))
    assert not checker.is_alive(_link("gone.md", source=note))


def test_anchor_and_mailto_links_are_alive() -> None:
    checker = LinkChecker()
    assert checker.is_alive(_link("#heading"))
    assert checker.is_alive(_link("mailto:someone@example.com"))


def test_remote_link_uses_head_request() -> None:
    checker = LinkChecker(timeout=1.0)
    with patch("notes_analyse.core.links.checker.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        mock_session.head.return_value = MagicMock(status_code=200)
        assert checker.is_alive(_link("https://example.com", LinkType.REMOTE))
        mock_session.head.assert_called_once_with(
            "https://example.com", allow_redirects=True, timeout=1.0
        )

        mock_session.head.return_value = MagicMock(status_code=404)
        assert not checker.is_alive(_link("https://example.com/gone", LinkType.REMOTE))
    mock_session_cls.assert_called_once()


def test_remote_link_connection_error_is_dead() -> None:
    checker = LinkChecker()
    with patch("notes_analyse.core.links.checker.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        mock_session.head.side_effect = requests.ConnectionError("refused")
        assert not checker.is_alive(_link("https://down.invalid", LinkType.REMOTE))


def _recording(sessions: list[MagicMock]):
    def make() -> MagicMock:
        sess = MagicMock()
        sess.head.return_value.status_code = 200
        sessions.append(sess)
        return sess

    return make


def test_each_thread_gets_its_own_session() -> None:
    checker = LinkChecker()
    seen: list[MagicMock] = []

    def check() -> None:
        checker.is_alive(_link("https://example.com", LinkType.REMOTE))

    with patch("notes_analyse.core.links.checker.requests.Session") as mock_session_cls:
        mock_session_cls.side_effect = _recording(seen)
        for _ in range(2):
            worker = threading.Thread(target=check)
            worker.start()
            worker.join()
        check()
        check()

    assert len(seen) == 3
    assert len({id(s) for s in seen}) == 3


def test_close_closes_every_session() -> None:
    sessions: list[MagicMock] = []
    with patch("notes_analyse.core.links.checker.requests.Session") as mock_session_cls:
        mock_session_cls.side_effect = _recording(sessions)
        with LinkChecker() as checker:
            worker = threading.Thread(
                target=checker.is_alive, args=(_link("https://a.example", LinkType.REMOTE),)
            )
            worker.start()
            worker.join()
            checker.is_alive(_link("https://b.example", LinkType.REMOTE))

    assert len(sessions) == 2
    for sess in sessions:
        sess.close.assert_called_once_with()


def test_org_internal_links_are_not_files(tmp_path: Path) -> None:
    note = tmp_path / "index.org"
    note.write_text("* Intro\nSee [[*Intro]], [[id:1234-abcd][by id]] and [[Intro]].\n")
    assert find_broken_links(note, LinkChecker(), local_only=True) == []


def test_org_explicit_file_link_without_extension_is_checked(tmp_path: Path) -> None:
    note = tmp_path / "index.org"
    note.write_text("[[file:missing]]\n")
    assert [lnk.target for lnk in find_broken_links(note, LinkChecker(), local_only=True)] == [
        "file:missing"
    ]


@pytest.mark.parametrize(
    "target", ["doi:10.1000/182", "id:1234-abcd", "news:comp.lang.python", "tel:+123"]
)
def test_non_file_schemes_are_alive(target: str) -> None:
    assert LinkChecker().is_alive(_link(target))


def test_markdown_bare_word_link_is_still_a_file(tmp_path: Path) -> None:
    note = tmp_path / "index.md"
    assert not LinkChecker().is_alive(_link("README", source=note))


@pytest.fixture
def linked_note(tmp_path: Path) -> Path:
    note = tmp_path / "index.md"
    note.write_text("[ok](ok.md) [bad](bad.md) [web](https://example.com)\n")
    return note


def test_find_broken_links_reports_dead_targets(linked_note: Path) -> None:
    checker = FakeLinkChecker(alive={"ok.md"})
    broken = find_broken_links(linked_note, checker)
    assert [lnk.target for lnk in broken] == ["bad.md", "https://example.com"]


def test_find_broken_links_local_only_skips_remote(linked_note: Path) -> None:
    checker = FakeLinkChecker(alive={"ok.md"})
    broken = find_broken_links(linked_note, checker, local_only=True)
    assert [lnk.target for lnk in broken] == ["bad.md"]
    assert all(lnk.linktype is LinkType.LOCAL for lnk in checker.checked)
