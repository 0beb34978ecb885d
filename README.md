# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every collectible, and then step onto the exit to win. Each
step is counted and printed to the terminal.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
```

The same entry point can be started with `python -m solong.app
path/to/level.ber`.

The window is drawn with pygame, using 64×64 pixel tiles. The tile
images are XPM files read from an `assets` directory in the current
working directory:

| File              | Drawn for    |
|-------------------|--------------|
| `collectible.xpm` | collectible  |
| `perso.xpm`       | player       |
| `exit.xpm`        | exit         |
| `wall.xpm`        | wall         |
| `floor.xpm`       | floor        |

Collectibles, the player and the exit are drawn on top of the floor
image, so pixels whose XPM colour is `None` show the floor through.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `S` / Down arrow   | move down  |
| `A` / Left arrow   | move left  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Closing the window also quits. Walking into a wall does nothing; the
exit only lets you in once every collectible has been picked up, and
then prints `Victoire!` and ends the game. Every step taken prints
`Mouvements: <count>`.

The command exits with status 0 when the game is won or closed, and
with status 1 after printing a message when:

- it is not given exactly one argument (`invalid number of argument`);
- the map is rejected (see below);
- a tile image cannot be read, or pygame fails to open the window.

## Map files

A map is a text file whose name ends in `.ber`. It is made of these
characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A valid map:

- is rectangular: every line has the same length, its line ending
  included, so the last line must end with a newline too;
- is closed by walls on all four sides;
- holds exactly one `P`, exactly one `E` and at least one `C`, and no
  other characters;
- lets the player reach every collectible and the exit without passing
  through the exit.

```
1111111
1P0C0E1
1111111
```

A file that cannot be read or breaks any of these rules is rejected
with `map error`; a file name that does not end in `.ber` is rejected
with `wrong file extension`.

## What is not included

The package ships no tile images and no levels. You supply the five
XPM files in `assets/` and your own `.ber` maps.

## Using it as a library

```python
from solong.gamemap import load_map
from solong.game import Game, Outcome

game_map = load_map("level.ber")
game = Game(game_map)
outcome = game.move(0, 1)          # step right: dy, dx
if outcome is Outcome.MOVED:
    print(game.player, game.moves, game.collectibles_left)
```

- `solong.gamemap` reads and validates maps: `check_filename`,
  `read_lines`, `check_rectangular`, `check_border`, `check_elements`,
  `find_player`, `flood_fill`, `check_reachable`, `parse_map` and
  `load_map`. Failures raise `MapError`. A valid map is a frozen
  `GameMap` with `rows`, `player` (as `(y, x)`), `collectibles`,
  `width`, `height` and `tile(y, x)`.
- `solong.game` holds the play state. `Game` has `rows`, `player`,
  `collectibles_left`, `moves`, `width`, `height`, `tile(y, x)`,
  `move(dy, dx)` and `handle_key(keycode)`; both of the latter return an
  `Outcome` (`IGNORED`, `BLOCKED`, `MOVED`, `WON`, `QUIT`). Key codes
  are the X keysyms for the arrows and Escape, and the character codes
  of `w`, `a`, `s`, `d`.
- `solong.xpm` reads XPM images: `load_xpm(path)` and
  `parse_xpm(lines)` return an `XpmImage` (`width`, `height`, `pixels`
  as rows of `0xRRGGBB` values, with `None` pixels set to
  `TRANSPARENT`); `strip_comments`, `quoted_lines` and `parse_color` are
  the steps they are built from. Errors raise `XpmError`.
- `solong.colors.color_by_name(name)` looks up an X11 colour name,
  ignoring case, and returns its `0xRRGGBB` value (`none` gives -1);
  unknown names raise `KeyError`.
- `solong.app` holds the window: `load_textures`, `draw_tile`,
  `draw_map`, `run(game_map, assets_dir)` and the command's `main`.