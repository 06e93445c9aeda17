"""Error kinds reported while loading and running a map."""

from __future__ import annotations

import enum
from typing import Union


class ErrorKind(enum.IntEnum):
    """The errors the game can report."""

    USAGE = -1
    EMPTY_MAP = 0
    NOT_RECTANGULAR = 1
    NOT_WALLED = 2
    BAD_ELEMENTS = 3
    INVALID_PATH = 4
    NOT_BER = 5
    NO_FILE = 6
    RENDER_FAILED = 7


_DESCRIPTIONS = {
    ErrorKind.USAGE: "Invalid arguments. Usage: ./so_long <map.ber>",
    ErrorKind.EMPTY_MAP: "Empty map",
    ErrorKind.NOT_RECTANGULAR: "Not rectangular",
    ErrorKind.NOT_WALLED: "Not surrounded by walls",
    ErrorKind.BAD_ELEMENTS: "Incorrect elements",
    ErrorKind.INVALID_PATH: "Invalid path",
    ErrorKind.NOT_BER: 'Not a ".ber" file',
    ErrorKind.NO_FILE: "File does not exist",
    ErrorKind.RENDER_FAILED: "Failed to render map",
}


def error_message(kind: Union[ErrorKind, int]) -> str:
    """Return the full report for ``kind`` as written to standard error."""
    return f"Error\n{_DESCRIPTIONS[ErrorKind(kind)]}\n"


class SoLongError(Exception):
    """Raised when a map cannot be loaded, validated or displayed."""

    def __init__(self, kind: Union[ErrorKind, int]) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(_DESCRIPTIONS[self.kind])