import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_color,
    parse_xpm,
    quoted_lines,
    strip_comments,
)


def test_strip_block_comment_keeps_quoted_text_and_length():
    text = '"a/*b*/" /* x */'
    result = strip_comments(text)
    assert result == '"a/*b*/" ' + " " * len("/* x */")
    assert len(result) == len(text)


def test_strip_line_comment_blanks_through_newline():
    text = "x // hi\ny"
    assert strip_comments(text) == "x " + " " * len("// hi\n") + "y"


def test_strip_comments_without_comments_is_identity():
    text = '"1 1 1 1", ". c red"'
    assert strip_comments(text) == text


def test_quoted_lines_in_order():
    text = 'static char *x[] = {"one", "two three",\n"four"};'
    assert list(quoted_lines(text)) == ["one", "two three", "four"]


def test_quoted_lines_ignores_unclosed_quote():
    assert list(quoted_lines('"a" "b')) == ["a"]


def test_parse_color_hex():
    assert parse_color("#FF0000") == 0xFF0000
    assert parse_color("#00ff00", None) == 0x00FF00


def test_parse_color_none_is_minus_one():
    assert parse_color("None") == -1


def test_parse_color_two_word_name():
    assert parse_color("ghost", "white") == parse_color("ghostwhite")


def test_parse_color_unknown_is_zero():
    assert parse_color("nosuchcolour") == 0
    assert parse_color("#zz") == 0


def test_parse_xpm_basic_image():
    image = parse_xpm([
        "2 2 2 1",
        "r c #FF0000",
        "b c blue",
        "rb",
        "br",
    ])
    red = parse_color("#FF0000")
    blue = parse_color("blue")
    assert image == XpmImage(2, 2, ((red, blue), (blue, red)))


def test_parse_xpm_none_is_transparent():
    image = parse_xpm(["1 1 1 1", ". c None", "."])
    assert image.pixels == ((TRANSPARENT,),)


def test_parse_xpm_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #010203", "bb c #0A0B0C", "bbaa"])
    assert image.pixels == ((parse_color("#0A0B0C"), parse_color("#010203")),)


def test_parse_xpm_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "x c #111111", "x c #222222", "x"])
    assert image.pixels == ((parse_color("#222222"),),)


def test_parse_xpm_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #111111", "abc c #222222", "abc"])
    assert image.pixels == ((parse_color("#111111"),),)


def test_parse_xpm_unknown_pixel_key_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.pixels[0][1] == 0
    assert image.pixels[0][0] == parse_color("#FFFFFF")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red"],
        ["1 1 1 1", "a c"],
        ["1 1 1 1"],
        ["1 2 1 1", "a c red", "a"],
        ["3 1 1 1", "a c red", "aa"],
    ],
)
def test_parse_xpm_rejects_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_reads_file_with_comments(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '". c None",\n'
        '"# c #00FF00", // green\n'
        '".#"\n'
        "};\n"
    )
    image = load_xpm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.pixels == ((TRANSPARENT, parse_color("#00FF00")),)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")