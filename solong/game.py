"""Game state: the player's position, moves, coins and key handling."""

from __future__ import annotations

import sys
from enum import Enum, IntEnum
from typing import Generic, TextIO, TypeVar

from solong.gamemap import COIN, FLOOR, PLAYER, WALL, EXIT, GameMap, MapError

T = TypeVar("T")

# Frames the coin animation waits before switching images.
ANIMATION_PERIOD = 6969 // 6


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307


class Facing(Enum):
    """Direction the player sprite faces."""

    RIGHT = 1
    UP = 2
    DOWN = 3
    LEFT = 4


class GameExit(Exception):
    """Raised to end the game, by escape or by reaching the exit."""

    def __init__(self, finished: bool = False) -> None:
        super().__init__("level finished" if finished else "game closed")
        self.finished = finished


class CoinAnimation(Generic[T]):
    """Two images that take turns, switching after a fixed number of ticks."""

    def __init__(self, first: T, second: T, period: int = ANIMATION_PERIOD) -> None:
        self._frames = (first, second)
        self._index = 0
        self._counter = 0
        self._period = period

    def tick(self) -> bool:
        """Advance the counter by one; return True when the image switched."""
        switched = False
        while True:
            hit = self._counter == self._period
            self._counter += 1
            if not hit:
                return switched
            self._index = 1 - self._index
            self._counter = 0
            switched = True

    def current(self) -> T:
        """Return the image shown now."""
        return self._frames[self._index]


_MOVES: dict[int, tuple[int, int, Facing]] = {
    Key.W: (0, -1, Facing.UP),
    Key.A: (-1, 0, Facing.LEFT),
    Key.S: (0, 1, Facing.DOWN),
    Key.D: (1, 0, Facing.RIGHT),
}


class Game:
    """A level in play: the map, the player and the counters shown to them."""

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        self.map = game_map
        self.out = out if out is not None else sys.stdout
        self.moves = 0
        self.facing = Facing.LEFT
        position = None
        coins = 0
        for y, row in enumerate(game_map.grid[:game_map.height]):
            for x, char in enumerate(row[:game_map.width]):
                if char == PLAYER:
                    position = (x, y)
                elif char == COIN:
                    coins += 1
        if position is None:
            raise MapError("Player not found or more than one player")
        self.player_x, self.player_y = position
        self.coins_left = coins

    def _passable(self, x: int, y: int) -> bool:
        try:
            return self.map.cell(x, y) != WALL
        except IndexError:
            return False

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; return True when the player moved.

        Escape raises GameExit. Moves into walls and unknown keys do nothing.
        """
        if keycode == Key.ESC:
            raise GameExit()
        move = _MOVES.get(keycode)
        if move is None:
            return False
        dx, dy, facing = move
        x, y = self.player_x + dx, self.player_y + dy
        if not self._passable(x, y):
            return False
        self.player_x, self.player_y = x, y
        self.moves += 1
        print(f"move {self.moves}", file=self.out)
        self.facing = facing
        if self.map.cell(x, y) == COIN:
            self.map.set_cell(x, y, FLOOR)
            self.coins_left -= 1
        return True

    def check_finished(self) -> None:
        """Raise GameExit once every coin is taken and the player stands on the exit."""
        if self.coins_left == 0 and self.map.cell(self.player_x, self.player_y) == EXIT:
            raise GameExit(finished=True)