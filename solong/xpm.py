"""Reading of XPM pixmaps: the image format used for the game's textures."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.colors import color_by_name

TRANSPARENT = 0xFF000000
"""Pixel value given to pixels whose colour is ``None``."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_MAX_NAME_LENGTH = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 0xRRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    """Replace every unquoted ``opener ... closer`` span with spaces."""
    chars = list(text)
    in_quote = False
    i = 0
    while i < len(chars):
        if chars[i] == '"':
            in_quote = not in_quote
            i += 1
            continue
        if not in_quote and text.startswith(opener, i):
            close = text.find(closer, i + len(opener))
            end = len(text) if close == -1 else close + len(closer)
            chars[i:end] = " " * (end - i)
            i = end
            continue
        i += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Blank out C comments outside string literals, keeping the length."""
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _words(line: str) -> list[str]:
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def parse_color(name: str, end: str | None = None) -> int:
    """Return the colour value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` when given, for two-word names) is looked up in the colour
    table. Unknown names give 0, ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_MAX_NAME_LENGTH]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _read_colors(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next(lines, None)
        if line is None:
            raise XpmError("missing colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = _words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour key in line: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour after key in line: {line!r}")
        follow = words[index + 2] if index + 2 < len(words) else None
        value = parse_color(words[index + 1], follow)
        key = line[:cpp]
        # Short keys are looked up in a direct table (the last definition
        # wins); longer keys are searched and the first definition wins.
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    return colors


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the string contents of an XPM file."""
    it = iter(lines)
    header = next(it, None)
    if header is None:
        raise XpmError("empty XPM data")
    fields = _words(header)
    if len(fields) < 4:
        raise XpmError(f"bad XPM header: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in fields[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"bad XPM header: {header!r}")
    colors = _read_colors(it, ncolors, cpp)

    rows = []
    for _ in range(height):
        line = next(it, None)
        if line is None:
            raise XpmError("missing pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            value = colors.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))