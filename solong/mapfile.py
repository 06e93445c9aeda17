"""Locating, checking and reading ``.ber`` map files."""

from __future__ import annotations

import os
from typing import TextIO, Union

from solong.errors import ErrorKind, SoLongError
from solong.linereader import LineReader
from solong.strings import split


def check_ber(filename: str) -> None:
    """Raise SoLongError unless ``filename`` names a ``.ber`` file."""
    dot = filename.rfind(".")
    slash = filename.rfind("/")
    ext = filename[dot:] if dot >= 0 else None
    if slash < 0:
        if ext is not None and len(filename) > 4 and ext[:4] == ".ber":
            return
    elif ext is not None and len(ext) == 4:
        name = filename[slash:]
        if len(name) > 5 and ext == ".ber":
            return
    raise SoLongError(ErrorKind.NOT_BER)


def read_map_text(stream: TextIO) -> str:
    """Read the whole map text from ``stream``.

    A line holding nothing but a newline makes the map invalid and
    raises SoLongError.
    """
    pieces = []
    for line in LineReader(stream):
        if line == "\n":
            raise SoLongError(ErrorKind.EMPTY_MAP)
        pieces.append(line)
    return "".join(pieces)


def load_map(path: Union[str, os.PathLike]) -> list[str]:
    """Open the map file at ``path`` and return its non-empty rows."""
    filename = os.fspath(path)
    try:
        stream = open(filename, encoding="latin-1", newline="")
    except OSError as exc:
        raise SoLongError(ErrorKind.NO_FILE) from exc
    with stream:
        check_ber(filename)
        text = read_map_text(stream)
    return split(text, "\n")