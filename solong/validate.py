"""Checks that a map is playable, and the facts gathered from a valid one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from solong.errors import ErrorKind, SoLongError

Position = tuple[int, int]

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
KNOWN_TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE})


@dataclass(frozen=True)
class MapInfo:
    """A validated map and the positions and counts found in it."""

    rows: tuple[str, ...]
    player: Position
    exit: Position
    width: int
    height: int
    collectibles: int


def is_rectangular(rows: Sequence[str]) -> bool:
    """Return True if there is at least one row and all rows have the first row's length."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width and not row.startswith("\n") for row in rows)


def check_walls(rows: Sequence[str]) -> bool:
    """Return True if the first and last rows and columns are all walls."""
    if not rows or not rows[0]:
        return False
    top, bottom = rows[0], rows[-1]
    if any(ch != WALL for ch in top) or any(ch != WALL for ch in bottom):
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in rows)


def has_only_known_tiles(rows: Sequence[str]) -> bool:
    """Return True if every tile is one of ``0 1 P E C``."""
    return all(ch in KNOWN_TILES for row in rows for ch in row)


def count_elements(rows: Sequence[str]) -> tuple[int, int, int]:
    """Return the numbers of players, exits and collectibles, in that order."""
    players = sum(row.count(PLAYER) for row in rows)
    exits = sum(row.count(EXIT) for row in rows)
    collectibles = sum(row.count(COLLECTIBLE) for row in rows)
    return players, exits, collectibles


def find_elements(rows: Sequence[str]) -> tuple[Optional[Position], Optional[Position]]:
    """Return the ``(x, y)`` of the player and of the exit.

    When a tile appears more than once the last one in reading order wins;
    a missing tile gives None.
    """
    player: Optional[Position] = None
    exit_: Optional[Position] = None
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == PLAYER:
                player = (x, y)
            elif ch == EXIT:
                exit_ = (x, y)
    return player, exit_


def flood_fill(rows: Sequence[str], start: Position) -> set[Position]:
    """Return every non-wall position reachable from ``start`` by orthogonal steps."""
    height = len(rows)
    reached: set[Position] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in reached or not (0 <= y < height and 0 <= x < len(rows[y])):
            continue
        if rows[y][x] == WALL:
            continue
        reached.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return reached


def has_valid_path(rows: Sequence[str], start: Position) -> bool:
    """Return True if every collectible and exit can be reached from ``start``."""
    reached = flood_fill(rows, start)
    return all(
        (x, y) in reached
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
        if ch in (COLLECTIBLE, EXIT)
    )


def validate_map(rows: Sequence[str]) -> MapInfo:
    """Check ``rows`` and return what was found, raising SoLongError on the first problem."""
    if not rows:
        raise SoLongError(ErrorKind.EMPTY_MAP)
    if not is_rectangular(rows):
        raise SoLongError(ErrorKind.NOT_RECTANGULAR)
    if not check_walls(rows):
        raise SoLongError(ErrorKind.NOT_WALLED)
    players, exits, collectibles = count_elements(rows)
    if not (players == 1 and exits == 1 and collectibles >= 1) or not has_only_known_tiles(rows):
        raise SoLongError(ErrorKind.BAD_ELEMENTS)
    player, exit_ = find_elements(rows)
    assert player is not None and exit_ is not None
    if not has_valid_path(rows, player):
        raise SoLongError(ErrorKind.INVALID_PATH)
    return MapInfo(
        rows=tuple(rows),
        player=player,
        exit=exit_,
        width=len(rows[0]),
        height=len(rows),
        collectibles=collectibles,
    )