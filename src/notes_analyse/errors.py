"""Exceptions raised while reading and analysing notes."""


class NoteError(Exception):
    """Base class for note analysis errors."""


class NoteReadError(NoteError):
    """A note file (or its metadata) could not be read."""


class NoteEncodingError(NoteReadError):
    """A note file is not valid UTF-8 text."""


class UnsupportedDialectError(NoteError, ValueError):
    """A file extension has no known header marker.

    File discovery only yields supported extensions, so this indicates a
    caller bug rather than a bad file.
    """
