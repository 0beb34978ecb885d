import pytest

from solong.gamemap import (
    GameMap,
    MapError,
    check_border,
    check_elements,
    check_filename,
    check_reachable,
    check_rectangular,
    find_player,
    flood_fill,
    load_map,
    parse_map,
    read_lines,
)

VALID = ["1111111\n", "1P0C0E1\n", "1111111\n"]


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_check_filename_rejects_wrong_extension():
    with pytest.raises(MapError, match="wrong file extension"):
        check_filename("map.txt")


def test_check_filename_rejects_too_short():
    with pytest.raises(MapError, match="wrong file extension"):
        check_filename("ber")


def test_check_filename_is_case_sensitive():
    with pytest.raises(MapError):
        check_filename("level.BER")


def test_check_filename_accepts_ber():
    assert check_filename("maps/level.ber") is None


def test_read_lines_keeps_newlines(tmp_path):
    text = "".join(VALID)
    path = write(tmp_path, "a.ber", text)
    lines = read_lines(path)
    assert lines == VALID
    assert "".join(lines) == text


def test_read_lines_last_line_without_newline(tmp_path):
    path = write(tmp_path, "a.ber", "111\n111")
    assert read_lines(path) == ["111\n", "111"]


def test_read_lines_empty_file(tmp_path):
    path = write(tmp_path, "a.ber", "")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="map error"):
        read_lines(tmp_path / "missing.ber")


def test_check_rectangular_accepts_equal_lines():
    assert check_rectangular(VALID) is None


def test_check_rectangular_rejects_missing_final_newline():
    with pytest.raises(MapError):
        check_rectangular(["1111\n", "1P01\n", "1111"])


def test_check_rectangular_rejects_uneven_lines():
    with pytest.raises(MapError):
        check_rectangular(["1111\n", "1P0C1\n", "1111\n"])


def test_check_border_accepts_closed_map():
    assert check_border(VALID) is None


@pytest.mark.parametrize(
    "lines",
    [
        ["1101111\n", "1P0C0E1\n", "1111111\n"],
        ["1111111\n", "1P0C0E1\n", "1111011\n"],
        ["1111111\n", "0P0C0E1\n", "1111111\n"],
        ["1111111\n", "1P0C0E0\n", "1111111\n"],
        [],
    ],
)
def test_check_border_rejects_openings(lines):
    with pytest.raises(MapError):
        check_border(lines)


def test_check_elements_returns_collectible_count():
    lines = ["111111\n", "1PCC01\n", "1C0E01\n", "111111\n"]
    assert check_elements(lines) == sum(line.count("C") for line in lines)


@pytest.mark.parametrize(
    "lines",
    [
        ["11111\n", "1P0E1\n", "11111\n"],
        ["11111\n", "1PPCE1\n", "11111\n"],
        ["111111\n", "1PCEE1\n", "111111\n"],
        ["11111\n", "10CE1\n", "11111\n"],
        ["111111\n", "1PCEX1\n", "111111\n"],
    ],
)
def test_check_elements_rejects_bad_counts_and_tiles(lines):
    with pytest.raises(MapError):
        check_elements(lines)


def test_find_player_returns_y_then_x():
    lines = ["11111\n", "10001\n", "100P1\n", "11111\n"]
    y, x = find_player(lines)
    assert lines[y][x] == "P"
    assert (y, x) == (2, 3)


def test_find_player_without_player():
    with pytest.raises(MapError):
        find_player(["111\n", "101\n", "111\n"])


def test_flood_fill_marks_reachable_and_stops_at_exit():
    grid = [list("11111"), list("1P0E1"), list("11111")]
    flood_fill(grid, 1, 1)
    assert "".join(grid[1]) == "1VVv1"
    assert "".join(grid[0]) == "11111"


def test_flood_fill_does_not_pass_walls():
    grid = [list("11111"), list("1P1C1"), list("11111")]
    flood_fill(grid, 1, 1)
    assert grid[1][3] == "C"
    assert grid[1][1] == "V"


def test_check_reachable_rejects_leftover_collectible():
    with pytest.raises(MapError):
        check_reachable(["1VVC1"])


def test_check_reachable_ignores_after_newline():
    assert check_reachable(["1VVv1\nC"]) is None


def test_parse_map_valid():
    game_map = parse_map(VALID)
    assert isinstance(game_map, GameMap)
    assert game_map.rows == tuple(line.rstrip("\n") for line in VALID)
    assert game_map.player == (1, 1)
    assert game_map.collectibles == 1
    assert game_map.width == len(VALID[0]) - 1
    assert game_map.height == len(VALID)
    assert game_map.tile(1, 5) == "E"


def test_parse_map_unreachable_collectible():
    with pytest.raises(MapError):
        parse_map(["11111\n", "1P1C1\n", "1E111\n", "11111\n"])


def test_parse_map_collectible_behind_exit():
    with pytest.raises(MapError):
        parse_map(["111111\n", "1PEC01\n", "111111\n"])


def test_parse_map_unreachable_exit():
    with pytest.raises(MapError):
        parse_map(["111111\n", "1PC1E1\n", "111111\n"])


def test_load_map_round_trip(tmp_path):
    path = write(tmp_path, "level.ber", "".join(VALID))
    game_map = load_map(path)
    assert "".join(row + "\n" for row in game_map.rows) == "".join(VALID)
    assert game_map.tile(*game_map.player) == "P"


def test_load_map_checks_extension_first(tmp_path):
    path = write(tmp_path, "level.txt", "".join(VALID))
    with pytest.raises(MapError, match="wrong file extension"):
        load_map(path)


def test_load_map_empty_file(tmp_path):
    path = write(tmp_path, "empty.ber", "")
    with pytest.raises(MapError, match="map error"):
        load_map(path)