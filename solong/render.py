"""Drawing the game: sprites, the map grid and the move/coin display."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from solong.game import ANIMATION_PERIOD, CoinAnimation, Facing, Game
from solong.gamemap import COIN, EXIT, FLOOR, PLAYER, WALL, MapError
from solong.xpm import XpmImage, load_xpm

PIXEL = 64
TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 24

# Sprite files per role; the first file that exists is used.
_SPRITE_FILES: dict[str, tuple[str, ...]] = {
    "wall": ("wall.xpm", "duvar.xpm"),
    "floor": ("background.xpm",),
    "exit": ("exit.xpm",),
    "coin": ("coin.xpm",),
    "coin_alt": ("coin2.xpm",),
    "right": ("right.xpm",),
    "left": ("left.xpm",),
    "up": ("up.xpm",),
    "down": ("down.xpm",),
}


def xpm_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a surface with per-pixel alpha.

    The top byte of a pixel value counts as transparency, so 0xFF000000 is
    fully transparent.
    """
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for index, value in enumerate(image.pixels):
        x, y = index % image.width, index // image.width
        alpha = 255 - ((value >> 24) & 0xFF)
        surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha))
    return surface


def format_number(number: int) -> str:
    """Return the decimal text of a counter shown on screen."""
    return str(number)


@dataclass
class SpriteSet:
    """The images used to draw a level."""

    wall: pygame.Surface
    floor: pygame.Surface
    exit: pygame.Surface
    coin: pygame.Surface
    coin_alt: pygame.Surface
    right: pygame.Surface
    left: pygame.Surface
    up: pygame.Surface
    down: pygame.Surface

    @classmethod
    def load(cls, directory: str | os.PathLike[str]) -> SpriteSet:
        """Load every sprite from XPM files in directory."""
        base = Path(directory)
        surfaces = {}
        for role, names in _SPRITE_FILES.items():
            path = next((base / name for name in names if (base / name).is_file()), base / names[0])
            surfaces[role] = xpm_to_surface(load_xpm(path))
        return cls(**surfaces)

    def player(self, facing: Facing) -> pygame.Surface:
        """Return the player image for the direction it faces."""
        return {
            Facing.RIGHT: self.right,
            Facing.UP: self.up,
            Facing.DOWN: self.down,
            Facing.LEFT: self.left,
        }[facing]


class Renderer:
    """Draws a game onto a surface, one frame at a time."""

    def __init__(
        self,
        window: pygame.Surface,
        sprites: SpriteSet,
        animate_coins: bool = True,
        font=None,
        coin_period: int = ANIMATION_PERIOD,
    ) -> None:
        self.window = window
        self.sprites = sprites
        self.animate_coins = animate_coins
        self._font = font
        self.animation: CoinAnimation[pygame.Surface] = CoinAnimation(
            sprites.coin, sprites.coin_alt, coin_period
        )

    @property
    def font(self):
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def _tile(self, char: str) -> pygame.Surface:
        if char == WALL:
            return self.sprites.wall
        if char in (FLOOR, PLAYER):
            return self.sprites.floor
        if char == EXIT:
            return self.sprites.exit
        if char == COIN:
            return self.animation.current() if self.animate_coins else self.sprites.coin
        raise MapError(f"invalid character in map: {char!r}")

    def draw_frame(self, game: Game) -> None:
        """Draw the map, the wall strip behind the display and the player."""
        game_map = game.map
        for y, row in enumerate(game_map.grid[:game_map.height]):
            for x, char in enumerate(row[:game_map.width]):
                self.window.blit(self._tile(char), (x * PIXEL, y * PIXEL))
                self.animation.tick()
        for x in range(game_map.width // 2):
            self.window.blit(self.sprites.wall, (x * PIXEL, 0))
        self.window.blit(
            self.sprites.player(game.facing),
            (game.player_x * PIXEL, game.player_y * PIXEL),
        )

    def draw_hud(self, game: Game) -> None:
        """Write the move count and the coins left at the top of the window."""
        top = PIXEL // 2
        items = (
            ("MOVE: ", (PIXEL // 3, top)),
            (format_number(game.moves), (PIXEL, top)),
            ("COIN: ", (int(PIXEL * 2 / 1.5), top)),
            (format_number(game.coins_left), (PIXEL * 2, top)),
        )
        for text, position in items:
            self.window.blit(self.font.render(text, True, TEXT_COLOR), position)