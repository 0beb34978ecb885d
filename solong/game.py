"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum

from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_ESCAPE = 65307

_DIRECTIONS: dict[int, tuple[int, int]] = {
    KEY_UP: (-1, 0),
    ord("w"): (-1, 0),
    KEY_DOWN: (1, 0),
    ord("s"): (1, 0),
    KEY_LEFT: (0, -1),
    ord("a"): (0, -1),
    KEY_RIGHT: (0, 1),
    ord("d"): (0, 1),
}


class Outcome(Enum):
    """What a key press or a move did to the game."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


class Game:
    """A game in progress: the tiles, the player and the move count."""

    def __init__(self, game_map: GameMap) -> None:
        self._grid = [list(row) for row in game_map.rows]
        self.player: tuple[int, int] = game_map.player
        self.collectibles_left = game_map.collectibles
        self.moves = 0

    @property
    def rows(self) -> tuple[str, ...]:
        """The current tiles, one string per row."""
        return tuple("".join(row) for row in self._grid)

    @property
    def width(self) -> int:
        return len(self._grid[0])

    @property
    def height(self) -> int:
        return len(self._grid)

    def tile(self, y: int, x: int) -> str:
        """Return the current tile at row ``y``, column ``x``."""
        return self._grid[y][x]

    def move(self, dy: int, dx: int) -> Outcome:
        """Try to move the player by ``(dy, dx)``.

        Walls block. A collectible is picked up on the way. The exit only
        lets the player through once every collectible has been taken,
        and reaching it wins the game without counting a move.
        """
        y, x = self.player
        ny, nx = y + dy, x + dx
        target = self._grid[ny][nx]
        if target == WALL:
            return Outcome.BLOCKED
        if target == EXIT:
            return Outcome.WON if self.collectibles_left == 0 else Outcome.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles_left -= 1
        self._grid[y][x] = FLOOR
        self._grid[ny][nx] = PLAYER
        self.player = (ny, nx)
        self.moves += 1
        return Outcome.MOVED

    def handle_key(self, keycode: int) -> Outcome:
        """Act on a key: arrows or WASD move, Escape quits."""
        if keycode == KEY_ESCAPE:
            return Outcome.QUIT
        direction = _DIRECTIONS.get(keycode)
        if direction is None:
            return Outcome.IGNORED
        return self.move(*direction)