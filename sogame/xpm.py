"""Reader for XPM pixmap images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .colors import text_to_rgb

# Pixel value stored for the "None" colour.
TRANSPARENT = 0xFF000000

_QUOTED = re.compile(r'"([^"]*)"')
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xRRGGBB pixel values, top to bottom."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]


def split_words(line: str) -> list[str]:
    """Split ``line`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    """Replace comments outside double quotes by spaces, closer included."""
    out: list[str] = []
    quoted = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            out.append(" " * (stop - i))
            i = stop
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def strip_comments(text: str) -> str:
    """Blank out C-style comments that are not inside quoted strings.

    Comments are replaced by spaces so the text keeps its length. Block
    comments are handled before line comments; a line comment is blanked
    together with the newline that ends it.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def _atoi(text: str) -> int:
    digits = _ATOI.match(text).group(1)
    if digits in ("", "+", "-"):
        return 0
    return int(digits)


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    strings = iter(_QUOTED.findall(strip_comments(text)))

    def next_string(what: str) -> str:
        try:
            return next(strings)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_string("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError("header values must be positive")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_string("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        name = words[index + 1]
        extra = words[index + 2] if index + 2 < len(words) else None
        value = text_to_rgb(name, extra)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = next_string("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(colors.get(line[x * cpp:(x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as err:
        raise XpmError(f"cannot read {path}") from err
    return parse_xpm(text)