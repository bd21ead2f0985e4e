"""Small string helpers used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of the first occurrence of needle in text, or -1.

    When the needle is longer than ``limit`` nothing is searched and -1 is
    returned.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]