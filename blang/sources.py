"""Reading program source files."""

from __future__ import annotations

import os


class SourceError(Exception):
    """Raised when a source file cannot be read."""


def read_file(path: str | os.PathLike) -> str:
    """Return the whole contents of the file at *path* as text.

    Bytes that are not valid UTF-8 are kept as surrogate escapes.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise SourceError(f"Failed to open file: {os.fspath(path)}") from exc
    return data.decode("utf-8", errors="surrogateescape")