# solong

A small top-down puzzle game. You walk a player around a grid map, pick up
every collectible, and then step onto the exit. Every move is counted and
printed to the terminal.

## Installing

```
pip install .
```

The game window is drawn with pygame, which is installed as a dependency.
For the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
```

Keys:

- arrow keys move the player one tile;
- Escape or closing the window quits.

Each successful move prints `Move count : N` to standard output. Walking into
a wall does nothing and is not counted. Once every collectible has been taken
and the player steps onto the exit, the move count is printed followed by
`Congratulations !` and the game ends.

Tile images are loaded from a directory named `textures` in the current
working directory. It must hold `Wall.xpm`, `BG.xpm`, `Coll.xpm`, `Exit.xpm`
and `Player.xpm`; if the window cannot be opened or an image cannot be loaded,
the game reports `Failed to render map`.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row of
tiles:

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | empty floor  |
| `P`       | player start |
| `E`       | exit         |
| `C`       | collectible  |

Example:

```
1111111
1P0C0E1
1111111
```

A map is accepted only when:

- the file exists and has a `.ber` extension;
- it is not empty and contains no blank lines;
- every row has the same length;
- it is surrounded by walls;
- it has exactly one `P`, exactly one `E`, at least one `C`, and no other
  characters;
- every collectible and the exit can be reached from the player's start.

When a map is rejected the game writes `Error` and then the reason on the next
line (`File does not exist`, `Not a ".ber" file`, `Empty map`,
`Not rectangular`, `Not surrounded by walls`, `Incorrect elements`,
`Invalid path`) to standard error. Running `solong` without a map file reports
the usage. The exit status is 1 when the file cannot be read or the window
cannot be shown, and 0 otherwise.

## Using it as a library

The map checks and the game rules can be used without opening a window:

- `solong.mapfile.load_map(path)` reads a `.ber` file into a list of rows;
  `check_ber(filename)` and `read_map_text(stream)` are the steps it uses.
- `solong.validate.validate_map(rows)` checks a map and returns a frozen
  `MapInfo` (`rows`, `player`, `exit`, `width`, `height`, `collectibles`).
  The single checks are available too: `is_rectangular`, `check_walls`,
  `has_only_known_tiles`, `count_elements`, `find_elements`, `flood_fill`
  and `has_valid_path`.
- `solong.errors.SoLongError` is raised for every problem; its `kind` is an
  `ErrorKind`, and `error_message(kind)` gives the text written to standard
  error.
- `solong.game.Game(info)` holds the game state. `Game.move(direction)` takes
  a `Direction` (`UP`, `DOWN`, `LEFT`, `RIGHT`) and returns a `MoveOutcome`
  (`BLOCKED`, `MOVED`, `WON`, `QUIT`, `IGNORED`); `Game.handle_key(key)` does
  the same from a key code. `tile_at(x, y)` and `rows()` show the current
  map, and `move_count`, `collectibles` and `finished` track progress. Moves
  print the move count to standard output.
- `solong.render.run(game, texture_dir)` opens the window and plays a game
  until it is won or quit; `Renderer` draws a game and `tile_rects(game)`
  lists the tiles with their pixel positions. Importing `solong.render`
  imports pygame.

The package also carries small text helpers used by the game:
`solong.chars` (character tests, `atoi`, `itoa`), `solong.strings`
(searching, splitting, trimming, bounded copies), `solong.memory`
(bytearray fills, copies and comparisons), `solong.output` (writing to
streams and a `format_printf`/`ft_printf` formatter for `%c %s %d %i %u %p
%x %X %%`) and `solong.linereader.LineReader` (reading a stream line by line).

## What it does not do

No tile images come with the package: you supply the `textures` directory
yourself. The texture directory used by the `solong` command cannot be
changed from the command line, and there is no level editor, saving or sound.