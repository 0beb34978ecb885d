import pygame
import pytest

from solong.app import Textures, draw_map, draw_tile, load_textures, main
from solong.game import Game
from solong.gamemap import parse_map
from solong.xpm import XpmError

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
YELLOW = (255, 255, 0, 255)


def solid(color):
    surface = pygame.Surface((64, 64), pygame.SRCALPHA, 32)
    surface.fill(color)
    return surface


def solid_textures():
    return Textures(
        wall=solid(WHITE),
        floor=solid(RED),
        player=solid(BLUE),
        collectible=solid(GREEN),
        exit=solid(YELLOW),
    )


def write_xpm(path):
    path.write_text(
        '/* XPM */\nstatic char *img[] = {\n"2 1 2 1",\n'
        '"a c #FF0000",\n"b c None",\n"ab"\n};\n'
    )


def test_load_textures(tmp_path):
    for name in ("collectible", "perso", "exit", "wall", "floor"):
        write_xpm(tmp_path / f"{name}.xpm")
    textures = load_textures(tmp_path)
    assert textures.wall.get_size() == (2, 1)
    assert tuple(textures.player.get_at((0, 0))) == RED
    assert textures.floor.get_at((1, 0)).a == 0


def test_load_textures_missing(tmp_path):
    with pytest.raises(XpmError):
        load_textures(tmp_path)


def test_draw_tile_layers_item_over_floor():
    player = pygame.Surface((64, 64), pygame.SRCALPHA, 32)
    player.fill((0, 0, 0, 0))
    player.fill(BLUE, pygame.Rect(0, 32, 64, 32))
    textures = Textures(
        wall=solid(WHITE),
        floor=solid(RED),
        player=player,
        collectible=solid(GREEN),
        exit=solid(YELLOW),
    )
    target = pygame.Surface((128, 64))
    draw_tile(target, textures, "P", 1, 0)
    assert tuple(target.get_at((70, 5))) == RED
    assert tuple(target.get_at((70, 40))) == BLUE
    assert tuple(target.get_at((5, 5))) == (0, 0, 0, 255)


def test_draw_tile_unknown_draws_nothing():
    target = pygame.Surface((64, 64))
    draw_tile(target, solid_textures(), "X", 0, 0)
    assert tuple(target.get_at((10, 10))) == (0, 0, 0, 255)


def test_draw_map():
    game = Game(parse_map(["11111\n", "1PCE1\n", "11111\n"]))
    target = pygame.Surface((5 * 64, 3 * 64))
    draw_map(target, game, solid_textures())
    assert tuple(target.get_at((32, 32))) == WHITE
    assert tuple(target.get_at((64 + 32, 64 + 32))) == BLUE
    assert tuple(target.get_at((128 + 32, 64 + 32))) == GREEN
    assert tuple(target.get_at((192 + 32, 64 + 32))) == YELLOW


def test_main_argument_count(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().out == "invalid number of argument\n"


def test_main_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == "wrong file extension\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == "map error\n"


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "map error\n"