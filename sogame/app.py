"""The game window: sprite loading, drawing and the event loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import pygame

from .game import Game, Key
from .layout import TILE_SIZE, Sprite, base_scene
from .mapcheck import EXIT, MapError, load_map
from .xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

WINDOW_TITLE = "So long"
DEFAULT_IMAGE_DIR = "img"
USAGE = "ERROR SYNTAX\nExemple : ./so_long path/of/map.ber\n"
STATUS_COLOR = (255, 0, 0)
STATUS_POSITION = (10, 10)

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


@dataclass(frozen=True)
class SpriteSet:
    """The loaded images, one surface per sprite."""

    surfaces: Mapping[Sprite, pygame.Surface]

    def surface(self, sprite: Sprite) -> pygame.Surface:
        """Return the surface for ``sprite``; KeyError if it was not loaded."""
        return self.surfaces[sprite]


def _rgba(value: int) -> bytes:
    if value == TRANSPARENT:
        return b"\x00\x00\x00\x00"
    return bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF))


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = b"".join(_rgba(value) for row in image.rows for value in row)
    return pygame.image.frombuffer(data, (image.width, image.height), "RGBA").copy()


def load_sprites(directory: str | PathLike[str]) -> SpriteSet:
    """Load every sprite's XPM file from ``directory``.

    Raises XpmError if any image is missing or unreadable.
    """
    base = Path(directory)
    return SpriteSet(
        {sprite: _to_surface(load_xpm(base / sprite.filename)) for sprite in Sprite}
    )


class _Window:
    """Draws sprites and the move counter on the display surface."""

    def __init__(self, screen: pygame.Surface, sprites: SpriteSet) -> None:
        self.screen = screen
        self.sprites = sprites
        self.font = pygame.font.Font(None, 24)

    def blit(self, sprite: Sprite, x: int, y: int) -> None:
        self.screen.blit(self.sprites.surface(sprite), (x, y))

    def blit_tile(self, sprite: Sprite, col: int, row: int) -> None:
        self.blit(sprite, col * TILE_SIZE, row * TILE_SIZE)

    def text(self, text: str) -> None:
        rendered = self.font.render(text, True, STATUS_COLOR)
        x, baseline = STATUS_POSITION
        self.screen.blit(rendered, (x, max(0, baseline - self.font.get_ascent())))


def _handle_key(game: Game, window: _Window, key: Key) -> None:
    old_x, old_y = game.player
    old_tile = game.tile_at(old_x, old_y)
    if not game.press_key(key):
        return
    if old_tile != EXIT:
        window.blit_tile(Sprite.FLOOR, old_x, old_y)
    window.blit(Sprite.CORNER_TOP_LEFT, 0, 0)
    window.text(game.status_text())
    x, y = game.player
    if game.tile_at(x, y) != EXIT:
        window.blit_tile(Sprite.HERO3, x, y)


def run(
    map_path: str | PathLike[str],
    image_dir: str | PathLike[str] = DEFAULT_IMAGE_DIR,
) -> Game:
    """Play the map at ``map_path`` until the game ends; return the final state.

    Raises MapError for a bad map and XpmError for a missing image, both
    before any window is opened.
    """
    game_map = load_map(map_path)
    sprites = load_sprites(image_dir)
    game = Game(game_map)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        window = _Window(screen, sprites)
        for placement in base_scene(game_map):
            window.blit(placement.sprite, placement.x, placement.y)
        pygame.display.flip()
        while game.running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYUP and event.key in _PYGAME_KEYS:
                _handle_key(game, window, _PYGAME_KEYS[event.key])
                pygame.display.flip()
    finally:
        pygame.quit()
    return game


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map named by the single argument."""
    if argv is None:
        argv = sys.argv[1:]
    if not os.environ:
        return 1
    if len(argv) != 1:
        sys.stdout.write(USAGE)
        return 1
    try:
        run(argv[0])
    except (MapError, XpmError) as err:
        sys.stderr.write(f"Error\n{err}\n")
        return 1
    return 0