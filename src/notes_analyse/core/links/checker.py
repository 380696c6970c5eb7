"""Find links in notes and check whether their targets still exist."""

import re
import threading
from pathlib import Path
from urllib.parse import unquote

import requests
from loguru import logger

from notes_analyse.config import LINK_TIMEOUT
from notes_analyse.core.reader import read_note
from notes_analyse.models.note import Link, LinkType
from notes_analyse.protocols import LinkCheckerProtocol

_MARKDOWN_LINK = re.compile(r"\[([^\]]*)\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)")
_ORG_LINK = re.compile(r"\[\[([^\]]+)\](?:\[([^\]]*)\])?\]")
_REMOTE_SCHEMES = ("http://", "https://")
_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*:")


def _linktype(target: str) -> LinkType:
    return LinkType.REMOTE if target.startswith(_REMOTE_SCHEMES) else LinkType.LOCAL


def parse_links(text: str, source: Path) -> list[Link]:
    """Return Markdown and Org links in the order they appear."""
    found: list[tuple[int, str, str]] = []
    for m in _MARKDOWN_LINK.finditer(text):
        found.append((m.start(), m.group(1), m.group(2)))
    for m in _ORG_LINK.finditer(text):
        target = m.group(1)
        found.append((m.start(), m.group(2) or target, target))
    found.sort()
    return [
        Link(text=label, target=target, source=source, linktype=_linktype(target))
        for _pos, label, target in found
    ]


def links_in_file(path: Path) -> list[Link]:
    return parse_links(read_note(path), path)


def _local_target(link: Link) -> Path | None:
    """Resolve a local link to a path, or None if it does not name a file.

    In-page anchors (``#id``, Org ``*Heading``), non-file schemes such as
    ``mailto:`` or ``id:``, and Org fuzzy heading links are not files.
    """
    target = link.target.removeprefix("file:")
    if target.startswith(("#", "*")) or _SCHEME.match(target):
        return None
    fuzzy = not link.target.startswith("file:") and "/" not in target and "." not in target
    if link.source.suffix == ".org" and fuzzy:
        return None
    target = unquote(target.split("#", 1)[0].split("::", 1)[0])
    path = Path(target).expanduser()
    if not path.is_absolute():
        path = link.source.parent / path
    return path


class LinkChecker:
    """Check local links on disk and remote links with an HTTP HEAD request.

    Each worker thread gets its own ``requests.Session``; ``close()`` (or
    leaving the ``with`` block) closes all of them.
    """

    def __init__(self, *, timeout: float = LINK_TIMEOUT) -> None:
        self.timeout = timeout
        self._local = threading.local()
        self._sessions: list[requests.Session] = []
        self._lock = threading.Lock()

    def __enter__(self) -> "LinkChecker":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _session(self) -> requests.Session:
        sess: requests.Session | None = getattr(self._local, "sess", None)
        if sess is None:
            sess = requests.Session()
            self._local.sess = sess
            with self._lock:
                self._sessions.append(sess)
        return sess

    def close(self) -> None:
        with self._lock:
            for sess in self._sessions:
                sess.close()
            self._sessions.clear()
        self._local = threading.local()

    def is_alive(self, link: Link) -> bool:
        if link.linktype is LinkType.LOCAL:
            path = _local_target(link)
            return path is None or path.exists()
        try:
            r = self._session().head(link.target, allow_redirects=True, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug("Link {} in {} failed: {}", link.target, link.source, e)
            return False
        return r.status_code < 400


def find_broken_links(
    path: Path, checker: LinkCheckerProtocol, *, local_only: bool = False
) -> list[Link]:
    """Return the links in a note whose targets are gone."""
    return [
        link
        for link in links_in_file(path)
        if (not local_only or link.linktype is LinkType.LOCAL) and not checker.is_alive(link)
    ]
