"""Command-line entry point: load a map, check it and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.errors import ErrorKind, SoLongError, error_message
from solong.game import Game
from solong.mapfile import load_map
from solong.render import run
from solong.validate import validate_map

TEXTURE_DIR = "textures"


def _read_rows(argv: Sequence[str]) -> list[str]:
    if not argv:
        raise SoLongError(ErrorKind.USAGE)
    return load_map(argv[0])


def _report(error: SoLongError) -> None:
    sys.stderr.write(error_message(error.kind))


def prepare_game(argv: Sequence[str]) -> Game:
    """Load and validate the map named by the first argument and return a new game."""
    return Game(validate_map(_read_rows(argv)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file given on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rows = _read_rows(args)
    except SoLongError as error:
        _report(error)
        return 1
    try:
        game = Game(validate_map(rows))
    except SoLongError as error:
        _report(error)
        return 0
    try:
        run(game, TEXTURE_DIR)
    except SoLongError as error:
        _report(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())