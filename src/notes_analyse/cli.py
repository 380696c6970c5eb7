"""CLI for analysing notes (structure, search, tags, links)."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from notes_analyse.config import DEFAULT_EXCLUDES, resolve_max_workers, resolve_notes_directory
from notes_analyse.core.analysis.scoring import (
    complexity_score,
    header_count,
    reading_minutes,
    size_in_kb,
    word_count,
)
from notes_analyse.core.discovery import discover_note_files
from notes_analyse.core.headers.extractor import extract_headers
from notes_analyse.core.headers.outline import render_note_outline
from notes_analyse.core.links.checker import LinkChecker, find_broken_links
from notes_analyse.core.parallel import map_files
from notes_analyse.core.ranking import rank
from notes_analyse.core.reader import note_size, read_note
from notes_analyse.core.search.note_filter import NoteFilter, format_match_flags
from notes_analyse.core.tags.extractor import InlineTagSource, format_tags
from notes_analyse.core.tags.tag_filter import TagFilter, is_untagged
from notes_analyse.logging_config import configure_logging
from notes_analyse.models.note import FileScore

app = typer.Typer(help="Analyse notes: structure, search and tags of Markdown and Org files.")

PathsArg = Annotated[
    list[Path] | None,
    typer.Argument(help="Note files or directories (default: NOTES_DIR or current directory)"),
]
PathsOpt = Annotated[
    list[Path] | None,
    typer.Option("--path", "-p", help="Note file or directory to search (repeatable)"),
]
ExcludeOpt = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-x", help="Skip paths containing this text (repeatable)"),
]
LimitOpt = Annotated[
    int | None,
    typer.Option("--limit", "-n", min=0, help="Show only the first N results"),
]
ReverseOpt = Annotated[bool, typer.Option("--reverse", "-r", help="Largest first")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _note_files(paths: list[Path] | None, exclude: list[str] | None) -> list[Path]:
    roots = paths or [resolve_notes_directory()]
    return discover_note_files(roots, excludes=(*DEFAULT_EXCLUDES, *(exclude or [])))


def _max_workers() -> int | None:
    try:
        return resolve_max_workers()
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


def _echo_ranked(
    results: list[FileScore], limit: int | None, reverse: bool, fmt: str = "{} {}"
) -> None:
    for r in rank(results, limit=limit, reverse=reverse):
        typer.echo(fmt.format(r.value, r.path))


@app.command()
def complexity(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
    limit: LimitOpt = None,
    reverse: ReverseOpt = False,
) -> None:
    """Mean header depth of each note."""
    files = _note_files(paths, exclude)
    headers = map_files(extract_headers, files, default=(), max_workers=_max_workers())
    scores = [FileScore(complexity_score(h), f) for h, f in zip(headers, files, strict=True)]
    _echo_ranked(scores, limit, reverse, "{:.3f} {}")


@app.command()
def headercount(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
    limit: LimitOpt = None,
    reverse: ReverseOpt = False,
) -> None:
    """Number of headers in each note."""
    files = _note_files(paths, exclude)
    headers = map_files(extract_headers, files, default=(), max_workers=_max_workers())
    counts = [FileScore(header_count(h), f) for h, f in zip(headers, files, strict=True)]
    _echo_ranked(counts, limit, reverse)


@app.command()
def size(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
    limit: LimitOpt = None,
    reverse: ReverseOpt = False,
) -> None:
    """File size of each note in kilobytes."""
    files = _note_files(paths, exclude)
    sizes = map_files(note_size, files, default=0, max_workers=_max_workers())
    results = [FileScore(size_in_kb(n), f) for n, f in zip(sizes, files, strict=True)]
    _echo_ranked(results, limit, reverse, "{:.3f}kb {}")


app.command(name="bytes", hidden=True)(size)


@app.command()
def words(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
    limit: LimitOpt = None,
    reverse: ReverseOpt = False,
) -> None:
    """Word count and reading time of each note."""
    files = _note_files(paths, exclude)
    counts = map_files(
        lambda p: word_count(read_note(p)), files, default=0, max_workers=_max_workers()
    )
    results = [FileScore(n, f) for n, f in zip(counts, files, strict=True)]
    for r in rank(results, limit=limit, reverse=reverse):
        typer.echo(f"{r.value} words {reading_minutes(r.value)}min {r.path}")


@app.command()
def toc(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
) -> None:
    """Show the table of contents of each note."""
    files = _note_files(paths, exclude)
    headers = map_files(extract_headers, files, default=None, max_workers=_max_workers())
    for h, f in zip(headers, files, strict=True):
        if h is None:
            continue
        typer.echo(render_note_outline(str(f), h), nl=False)


app.command(name="structure", hidden=True)(toc)


@app.command()
def search(
    query: Annotated[list[str], typer.Argument(help="Words to find; prefix tags with @")],
    paths: PathsOpt = None,
    exclude: ExcludeOpt = None,
    ranked: bool = typer.Option(
        False, "--ranked", "-R", help="Rank by how often the words occur instead"
    ),
    limit: LimitOpt = None,
) -> None:
    """Find notes whose title, contents or tags match the query.

    Each hit is flagged T (title), t (tags) and/or c (contents).
    """
    files = _note_files(paths, exclude)
    note_filter = NoteFilter.from_tokens(query)

    if ranked:
        scores = map_files(note_filter.frequency, files, default=0, max_workers=_max_workers())
        hits = [FileScore(s, f) for s, f in zip(scores, files, strict=True) if s > 0]
        _echo_ranked(hits, limit, reverse=True)
        return

    matches = map_files(
        note_filter.matches, files, default=frozenset(), max_workers=_max_workers()
    )
    hits_shown = 0
    for m, f in zip(matches, files, strict=True):
        if not m or (limit is not None and hits_shown >= limit):
            continue
        typer.echo(f"{format_match_flags(m)} {f}")
        hits_shown += 1


@app.command()
def tags(
    required: Annotated[list[str] | None, typer.Argument(help="Tags a note must have")] = None,
    forbidden: Annotated[
        list[str] | None,
        typer.Option("--not", "-N", help="Tag a note must not have (repeatable)"),
    ] = None,
    match_any: bool = typer.Option(
        False, "--any", "-a", help="Require any one of the tags instead of all"
    ),
    paths: PathsOpt = None,
    exclude: ExcludeOpt = None,
) -> None:
    """List notes matching required and forbidden tags, with all their tags.

    Without required tags no note matches.
    """
    files = _note_files(paths, exclude)
    tag_filter = TagFilter.from_lists(required or [], forbidden or [], match_any=match_any)
    if not tag_filter.required:
        logger.warning("No required tags given; nothing can match")
    source = InlineTagSource()
    file_tags = map_files(source.tags_for, files, default=None, max_workers=_max_workers())
    for t, f in zip(file_tags, files, strict=True):
        if t is None or not tag_filter.matches(t):
            continue
        typer.echo(f"{str(f):40} {format_tags(t)}")


@app.command()
def untagged(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
) -> None:
    """List notes without any tags."""
    files = _note_files(paths, exclude)
    source = InlineTagSource()
    file_tags = map_files(source.tags_for, files, default=None, max_workers=_max_workers())
    for t, f in zip(file_tags, files, strict=True):
        if t is not None and is_untagged(t):
            typer.echo(str(f))


@app.command()
def links(
    paths: PathsArg = None,
    exclude: ExcludeOpt = None,
    local_only: bool = typer.Option(False, "--local", "-l", help="Only check local links"),
) -> None:
    """List broken links in each note."""
    files = _note_files(paths, exclude)
    with LinkChecker() as checker:
        broken = map_files(
            lambda p: find_broken_links(p, checker, local_only=local_only),
            files,
            default=[],
            max_workers=_max_workers(),
        )
    for b, f in zip(broken, files, strict=True):
        if not b:
            continue
        typer.echo(str(f))
        for link in b:
            typer.echo(f"> {link.text} ({link.target})")
        typer.echo()
