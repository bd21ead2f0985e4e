"""Game maps: reading ``.ber`` files and checking that they are playable.

A map is a rectangle of characters: ``1`` walls, ``0`` floor, ``P`` the
player, ``E`` the exit and ``C`` coins. Rows are taken with the width of
the first line, one newline apart.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COIN = "C"

# Stands in for cells that lie past the end of the map text.
_MISSING = "\0"


class MapError(ValueError):
    """Raised when a map cannot be read or is not a valid map."""


def line_length(text: str) -> int:
    """Return the number of characters before the first newline."""
    end = text.find("\n")
    return len(text) if end == -1 else end


def row_count(text: str) -> int:
    """Return the number of rows: one more than the number of newlines."""
    return text.count("\n") + 1


def has_ber_extension(path: str | os.PathLike[str]) -> bool:
    """Tell whether the path names a ``.ber`` map file."""
    return os.fspath(path).endswith(".ber")


@dataclass
class GameMap:
    """A map grid together with the counts of its special cells."""

    grid: list[list[str]]
    width: int
    height: int
    exits: int = 0
    players: int = 0
    coins: int = 0
    rows: list[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rows = ["".join(row) for row in self.grid]

    @classmethod
    def from_text(cls, text: str) -> GameMap:
        """Build a map from the text of a map file."""
        width = line_length(text)
        height = row_count(text)
        grid: list[list[str]] = []
        for y in range(height):
            start = y * (width + 1)
            row = text[start:start + width]
            grid.append(list(row.ljust(width, _MISSING)))
        cells = [char for row in grid for char in row]
        return cls(
            grid=grid,
            width=width,
            height=height,
            exits=cells.count(EXIT),
            players=cells.count(PLAYER),
            coins=cells.count(COIN),
        )

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> GameMap:
        """Read a map file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise MapError(f"cannot read map {os.fspath(path)}: {exc}") from exc
        return cls.from_text(data.decode("latin-1"))

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")

    def cell(self, x: int, y: int) -> str:
        """Return the character at column x, row y."""
        self._check_bounds(x, y)
        return self.grid[y][x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        """Replace the character at column x, row y."""
        self._check_bounds(x, y)
        if len(value) != 1:
            raise ValueError(f"a cell holds one character, not {value!r}")
        self.grid[y][x] = value
        self.rows[y] = "".join(self.grid[y])

    def validate(self) -> None:
        """Raise MapError unless the map has an exit, coins, one player and closed walls."""
        if self.exits <= 0:
            raise MapError("Exit not found")
        if self.coins <= 0:
            raise MapError("Coin not found")
        if self.players != 1:
            raise MapError("Player not found or more than one player")
        if self.width <= 0:
            raise MapError("MAP: (LEFT)")
        for row in self.grid[:self.height - 1]:
            if row[0] != WALL:
                raise MapError("MAP: (LEFT)")
            if row[self.width - 1] != WALL:
                raise MapError("MAP: (RIGHT)")
        top, bottom = self.grid[0], self.grid[self.height - 1]
        for x in range(self.width):
            if top[x] != WALL:
                raise MapError("MAP: (UP)")
            if bottom[x] != WALL:
                raise MapError("MAP: (DOWN)")