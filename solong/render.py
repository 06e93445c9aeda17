"""Drawing the map in a window and running the event loop."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.errors import ErrorKind, SoLongError  # noqa: E402
from solong.game import (  # noqa: E402
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Game,
    MoveOutcome,
)

TILE_SIZE = 64
WINDOW_TITLE = "so_long"
TEXTURE_FILES = {
    "1": "Wall.xpm",
    "0": "BG.xpm",
    "C": "Coll.xpm",
    "E": "Exit.xpm",
    "P": "Player.xpm",
}

_KEYSYMS = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


def tile_rects(game: Game) -> Iterator[tuple[str, tuple[int, int]]]:
    """Yield each drawable tile with the pixel position of its top-left corner."""
    for y, row in enumerate(game.rows()):
        for x, tile in enumerate(row):
            if tile in TEXTURE_FILES:
                yield tile, (x * TILE_SIZE, y * TILE_SIZE)


class Renderer:
    """A window showing a game, with one texture per tile kind."""

    def __init__(self, game: Game, texture_dir: Union[str, os.PathLike] = "textures") -> None:
        self.game = game
        directory = Path(texture_dir)
        try:
            pygame.display.init()
            self.surface = pygame.display.set_mode(
                (TILE_SIZE * game.width, TILE_SIZE * game.height)
            )
            pygame.display.set_caption(WINDOW_TITLE)
            self._textures = {
                tile: pygame.image.load(str(directory / name))
                for tile, name in TEXTURE_FILES.items()
            }
        except (pygame.error, OSError) as exc:
            pygame.quit()
            raise SoLongError(ErrorKind.RENDER_FAILED) from exc

    def draw(self) -> None:
        """Draw every tile of the current map and show the result."""
        for tile, position in tile_rects(self.game):
            self.surface.blit(self._textures[tile], position)
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and release the display."""
        pygame.quit()


def run(game: Game, texture_dir: Union[str, os.PathLike] = "textures") -> MoveOutcome:
    """Show ``game`` and play it until the player wins or quits; return how it ended."""
    renderer = Renderer(game, texture_dir)
    try:
        renderer.draw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return MoveOutcome.QUIT
            if event.type != pygame.KEYDOWN:
                continue
            keysym = _KEYSYMS.get(event.key)
            if keysym is None:
                continue
            outcome = game.handle_key(keysym)
            if outcome in (MoveOutcome.MOVED, MoveOutcome.WON):
                renderer.draw()
            if outcome in (MoveOutcome.WON, MoveOutcome.QUIT):
                return outcome
    finally:
        renderer.close()