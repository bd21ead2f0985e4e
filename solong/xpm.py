"""Reader for XPM images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.colors import parse_color
from solong.wordtab import find, find_outside_quotes, split_words

TRANSPARENT = 0xFF000000

_ATOI = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: 32-bit pixel values in row-major order."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, length: int) -> str:
    length = min(length, len(text) - start)
    return text[:start] + " " * length + text[start + length:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces, keeping the length."""
    while (begin := find_outside_quotes(text, "/*", len(text))) != -1:
        end = find(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", len(text))) != -1:
        end = find(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _colour_spec(text: str) -> int:
    words = split_words(text)
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {text!r}") from None
    rest = words[index + 1:]
    if not rest:
        raise XpmError(f"colour definition without a colour: {text!r}")
    return parse_color(rest[0], rest[1] if len(rest) > 1 else None)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its header, colour and pixel strings."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")

    # Small keys use a direct table where later definitions replace earlier
    # ones; longer keys are searched so that the first definition wins.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        key = line[:cpp]
        colour = _colour_spec(line[cpp:])
        if last_wins or key not in palette:
            palette[key] = colour

    pixels: list[int] = []
    for _ in range(height):
        line = next_line("pixel row")
        for x in range(width):
            colour = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            pixels.append(TRANSPARENT if colour == -1 else colour & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(quoted_lines(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(data.decode("latin-1"))