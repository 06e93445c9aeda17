"""Game state: the player's moves over a validated map."""

from __future__ import annotations

import enum

from solong.output import ft_printf
from solong.validate import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, MapInfo

KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364


class Direction(enum.Enum):
    """A step of one tile."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveOutcome(enum.Enum):
    """What came of a key press or a move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


_KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


class Game:
    """A game in progress on a validated map."""

    def __init__(self, info: MapInfo) -> None:
        self._grid = [list(row) for row in info.rows]
        self.player = info.player
        self.exit = info.exit
        self.collectibles = info.collectibles
        self.width = info.width
        self.height = info.height
        self.move_count = 0
        self.finished = False

    def move(self, direction: Direction) -> MoveOutcome:
        """Step the player one tile; walls block, and reaching the exit with everything collected wins."""
        if self.finished:
            return MoveOutcome.IGNORED
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        target = self._grid[ny][nx]
        if target == WALL:
            return MoveOutcome.BLOCKED
        self.move_count += 1
        self._grid[y][x] = EXIT if (x, y) == self.exit else FLOOR
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self.player = (nx, ny)
        self._grid[ny][nx] = PLAYER
        ft_printf("Move count : %d\n", self.move_count)
        if target == EXIT and self.collectibles == 0:
            ft_printf("Congratulations !\n")
            self.finished = True
            return MoveOutcome.WON
        return MoveOutcome.MOVED

    def handle_key(self, key: int) -> MoveOutcome:
        """React to a key code: escape quits, the arrows move."""
        if key == KEY_ESCAPE:
            self.finished = True
            return MoveOutcome.QUIT
        direction = _KEY_DIRECTIONS.get(key)
        if direction is None:
            return MoveOutcome.IGNORED
        return self.move(direction)

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile currently shown at ``(x, y)``."""
        return self._grid[y][x]

    def rows(self) -> list[str]:
        """Return the current map as a list of row strings."""
        return ["".join(row) for row in self._grid]