"""Reading XPM images, the text format the game's textures are stored in.

Only what the textures need is supported: a header line
``"width height ncolors chars_per_pixel"``, one colour definition per colour
(``"<key> c <colour>"``) and one row of keys per image line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from solong.colors import NONE_COLOR, lookup_color

__all__ = [
    "TRANSPARENT",
    "XpmError",
    "XpmImage",
    "strip_comments",
    "split_words",
    "color_from_text",
    "parse_xpm",
    "load_xpm",
]

TRANSPARENT = 0xFF000000
"""Pixel value given to pixels whose colour is ``None``."""

_NAME_LIMIT = 63
_QUOTED = re.compile(r'"([^"]*)"')
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")


class XpmError(Exception):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds a 0xAARRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def _find_unquoted(text: str, needle: str) -> int:
    quoted = False
    for index, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, index):
            return index
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that are not inside quotes.

    Comments are replaced by spaces, so the text keeps its length.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (start := _find_unquoted(text, opener)) >= 0:
            end = text.find(closer, start + len(opener))
            stop = len(text) if end < 0 else end + len(closer)
            text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def color_from_text(name: str, extra: Optional[str]) -> int:
    """Return the colour named by ``name``, or by ``name`` and the word after it.

    ``#rrggbb`` is read as hexadecimal and ignores ``extra``. Otherwise the
    two words joined by a space are looked up (``light blue``); ``None``
    gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return lookup_color(name)
    if extra:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    return lookup_color(name)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines, what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header values")
    return width, height, ncolors, cpp


def _read_palette(lines, ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour definition")
        key = line[:cpp]
        words = split_words(line[cpp:])
        if "c" not in words:
            raise XpmError(f"colour definition without 'c': {line!r}")
        index = words.index("c") + 1
        if index >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        extra = words[index + 1] if index + 1 < len(words) else None
        color = color_from_text(words[index], extra)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    return palette


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    lines = iter(_QUOTED.findall(strip_comments(text)))
    width, height, ncolors, cpp = _read_header(_next_line(lines, "XPM header"))
    palette = _read_palette(lines, ncolors, cpp)
    rows = []
    for _ in range(height):
        line = _next_line(lines, "pixel row")
        row = []
        for x in range(width):
            key = line[x * cpp:(x + 1) * cpp]
            if len(key) < cpp:
                raise XpmError(f"pixel row too short: {line!r}")
            color = palette.get(key, 0)
            if color == NONE_COLOR:
                color = TRANSPARENT
            row.append(color & 0xFFFFFFFF)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: Union[str, PathLike]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(data.decode("latin-1"))