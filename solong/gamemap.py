"""Loading and validation of ``.ber`` map files."""

from __future__ import annotations

import os
import re
from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from pathlib import Path

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"

_VISITED = "V"
_VISITED_EXIT = "v"
_BLOCKING = frozenset({WALL, _VISITED, EXIT, _VISITED_EXIT})
_VALID_TILES = frozenset({WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT})
_LINE = re.compile(r"[^\n]*\n|[^\n]+")

MAP_ERROR = "map error"
EXTENSION_ERROR = "wrong file extension"


class MapError(ValueError):
    """Raised when a map file is missing, badly named or invalid."""


@dataclass(frozen=True)
class GameMap:
    """A validated map.

    ``rows`` hold the tiles of each line without the line ending;
    ``player`` is the starting position as ``(y, x)``.
    """

    rows: tuple[str, ...]
    player: tuple[int, int]
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, y: int, x: int) -> str:
        """Return the tile at row ``y``, column ``x``."""
        return self.rows[y][x]


def _content(line: str) -> str:
    """Return the part of a line before its newline."""
    return line.split("\n", 1)[0]


def check_filename(path: str | os.PathLike[str]) -> None:
    """Reject a map path that does not end in ``.ber``."""
    name = os.fspath(path)
    if len(name) < 4 or not name.endswith(".ber"):
        raise MapError(EXTENSION_ERROR)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file into lines, each keeping its trailing newline."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(MAP_ERROR) from exc
    return _LINE.findall(data.decode("latin-1"))


def check_rectangular(lines: Sequence[str]) -> None:
    """Require every line, newline included, to have the same length."""
    if not lines:
        return
    first = len(lines[0])
    if any(len(line) != first for line in lines):
        raise MapError(MAP_ERROR)


def check_border(lines: Sequence[str]) -> None:
    """Require the map to be closed in by walls on all four sides."""
    if not lines:
        raise MapError(MAP_ERROR)
    top = _content(lines[0])
    bottom = _content(lines[-1])
    if any(tile != WALL for tile in top) or any(tile != WALL for tile in bottom):
        raise MapError(MAP_ERROR)
    width = len(bottom)
    if width == 0:
        raise MapError(MAP_ERROR)
    for line in lines:
        if not line or line[0] != WALL:
            raise MapError(MAP_ERROR)
        if len(line) < width or line[width - 1] != WALL:
            raise MapError(MAP_ERROR)


def check_elements(lines: Iterable[str]) -> int:
    """Check the tiles used and return the number of collectibles.

    The map must hold only known tiles, exactly one player, exactly one
    exit and at least one collectible.
    """
    counts: Counter[str] = Counter()
    for line in lines:
        for tile in _content(line):
            if tile not in _VALID_TILES:
                raise MapError(MAP_ERROR)
            counts[tile] += 1
    if counts[PLAYER] != 1 or counts[COLLECTIBLE] < 1 or counts[EXIT] != 1:
        raise MapError(MAP_ERROR)
    return counts[COLLECTIBLE]


def find_player(lines: Iterable[str]) -> tuple[int, int]:
    """Return the ``(y, x)`` position of the first player tile."""
    for y, line in enumerate(lines):
        x = _content(line).find(PLAYER)
        if x != -1:
            return y, x
    raise MapError(MAP_ERROR)


def flood_fill(grid: Sequence[MutableSequence[str]], y: int, x: int) -> None:
    """Mark every tile reachable from ``(y, x)`` in place.

    Walls stop the fill. The exit is marked as reached but also stops it,
    so nothing can be reached through the exit.
    """
    stack = [(y, x)]
    while stack:
        cy, cx = stack.pop()
        if not (0 <= cy < len(grid) and 0 <= cx < len(grid[cy])):
            continue
        tile = grid[cy][cx]
        if tile in _BLOCKING:
            if tile == EXIT:
                grid[cy][cx] = _VISITED_EXIT
            continue
        grid[cy][cx] = _VISITED
        stack.extend(((cy, cx + 1), (cy, cx - 1), (cy + 1, cx), (cy - 1, cx)))


def check_reachable(grid: Iterable[Iterable[str]]) -> None:
    """Fail if a flood-filled grid still holds a collectible or the exit."""
    for row in grid:
        for tile in row:
            if tile == "\n":
                break
            if tile in (COLLECTIBLE, EXIT):
                raise MapError(MAP_ERROR)


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate map lines and build a :class:`GameMap`."""
    lines = list(lines)
    check_rectangular(lines)
    check_border(lines)
    collectibles = check_elements(lines)
    player = find_player(lines)
    grid = [list(_content(line)) for line in lines]
    flood_fill(grid, *player)
    check_reachable(grid)
    return GameMap(
        rows=tuple(_content(line) for line in lines),
        player=player,
        collectibles=collectibles,
    )


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Check the file name, read the file and validate its map."""
    check_filename(path)
    return parse_map(read_lines(path))