"""The game window: textures, drawing and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import (  # noqa: E402
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Game,
    Outcome,
)
from solong.gamemap import (  # noqa: E402
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    MapError,
    load_map,
)
from solong.xpm import TRANSPARENT, XpmError, XpmImage, load_xpm  # noqa: E402

TILE = 64
TITLE = "So_Long"

_KEYSYMS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


@dataclass(frozen=True)
class Textures:
    """The images drawn for each kind of tile."""

    wall: pygame.Surface
    floor: pygame.Surface
    player: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface


def _surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA, 32)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                value &= 0xFFFFFF
                surface.set_at(
                    (x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
                )
    return surface


def load_textures(assets_dir: str | os.PathLike[str] = "assets") -> Textures:
    """Load the five tile images from ``assets_dir``.

    Raises XpmError if one of them is missing or unreadable.
    """
    base = Path(assets_dir)
    collectible = _surface(load_xpm(base / "collectible.xpm"))
    player = _surface(load_xpm(base / "perso.xpm"))
    exit_ = _surface(load_xpm(base / "exit.xpm"))
    wall = _surface(load_xpm(base / "wall.xpm"))
    floor = _surface(load_xpm(base / "floor.xpm"))
    return Textures(
        wall=wall, floor=floor, player=player, collectible=collectible, exit=exit_
    )


def draw_tile(
    surface: pygame.Surface, textures: Textures, tile: str, x: int, y: int
) -> None:
    """Draw one tile at column ``x``, row ``y``; items sit on the floor."""
    position = (x * TILE, y * TILE)
    if tile == WALL:
        surface.blit(textures.wall, position)
        return
    overlay = {
        PLAYER: textures.player,
        COLLECTIBLE: textures.collectible,
        EXIT: textures.exit,
    }.get(tile)
    if tile != FLOOR and overlay is None:
        return
    surface.blit(textures.floor, position)
    if overlay is not None:
        surface.blit(overlay, position)


def draw_map(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Draw every tile of the game."""
    for y, row in enumerate(game.rows):
        for x, tile in enumerate(row):
            draw_tile(surface, textures, tile, x, y)


def run(game_map: GameMap, assets_dir: str | os.PathLike[str] = "assets") -> None:
    """Open the window and play until the game is won or closed."""
    game = Game(game_map)
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * TILE, game.height * TILE))
        pygame.display.set_caption(TITLE)
        textures = load_textures(assets_dir)
        draw_map(screen, game, textures)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type != pygame.KEYDOWN:
                    continue
                old_y, old_x = game.player
                outcome = game.handle_key(_KEYSYMS.get(event.key, event.key))
                if outcome is Outcome.MOVED:
                    draw_tile(screen, textures, FLOOR, old_x, old_y)
                    y, x = game.player
                    draw_tile(screen, textures, PLAYER, x, y)
                    pygame.display.flip()
                    print(f"Mouvements: {game.moves}")
                elif outcome is Outcome.WON:
                    print("Victoire!")
                    return
                elif outcome is Outcome.QUIT:
                    return
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("invalid number of argument")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print(exc)
        return 1
    try:
        run(game_map)
    except (XpmError, pygame.error) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())