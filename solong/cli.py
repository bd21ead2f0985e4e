"""Command line entry point: load a map and play it in a window."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from solong.game import Game, GameExit, Key
from solong.gamemap import COIN, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError, has_ber_extension
from solong.xpm import XpmError

TITLE = "so_long"
DEFAULT_SPRITE_DIR = "sprite"
_FRAME_RATE = 60
_VALID_CELLS = frozenset((WALL, FLOOR, PLAYER, EXIT, COIN))


def prepare_game(path: str | os.PathLike[str]) -> Game:
    """Load and check a ``.ber`` map and return a game ready to play.

    Raises MapError when the file name, the file or the map is not valid.
    """
    if not has_ber_extension(path):
        raise MapError("Ber error")
    game_map = GameMap.load(path)
    game_map.validate()
    for row in game_map.grid[:game_map.height]:
        for char in row[:game_map.width]:
            if char not in _VALID_CELLS:
                raise MapError("Invalid character in map")
    return Game(game_map)


def run(path: str | os.PathLike[str], sprite_dir: str | os.PathLike[str] = DEFAULT_SPRITE_DIR) -> bool:
    """Play the map at path in a window until it is closed or finished.

    Returns True when the player reached the exit with every coin taken.
    """
    game = prepare_game(path)

    import pygame

    from solong.render import PIXEL, Renderer, SpriteSet

    sprites = SpriteSet.load(sprite_dir)
    keys = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_ESCAPE: Key.ESC,
    }
    pygame.init()
    try:
        window = pygame.display.set_mode((game.map.width * PIXEL, game.map.height * PIXEL))
        pygame.display.set_caption(TITLE)
        renderer = Renderer(window, sprites)
        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        raise GameExit()
                    if event.type == pygame.KEYDOWN and event.key in keys:
                        game.handle_key(keys[event.key])
                renderer.draw_frame(game)
                game.check_finished()
                renderer.draw_hud(game)
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        except GameExit as exc:
            return exc.finished
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error\nMap not found")
        return 0
    if len(args) > 1:
        return 0
    try:
        run(args[0])
    except (MapError, XpmError) as exc:
        print(f"Error\n{exc}")
    return 0