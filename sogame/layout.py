"""Where each sprite is drawn when a map is first shown."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from .mapcheck import COLLECTIBLE, EXIT, PLAYER, WALL, GameMap

TILE_SIZE = 100


class Sprite(Enum):
    """The images the game draws, by file name, in load order."""

    WALL_TOP = "Longwall-top.xpm"
    CORNER_TOP_LEFT = "Corner-top-left.xpm"
    CORNER_TOP_RIGHT = "Corner-top-right.xpm"
    CORNER_BOTTOM_RIGHT = "Corner-bottom-right.xpm"
    CORNER_BOTTOM_LEFT = "Corner-bottom-left.xpm"
    WALL_BOTTOM = "Longwall-bottom.xpm"
    WALL_LEFT = "Longwall-left.xpm"
    WALL_RIGHT = "Longwall-right.xpm"
    FLOOR = "White.xpm"
    WHITE_TOP_RIGHT = "White-top-right.xpm"
    WHITE_TOP_LEFT = "White-top-left.xpm"
    WHITE_BOTTOM_LEFT = "White-bottom-left.xpm"
    WHITE_BOTTOM_RIGHT = "White-bottom-right.xpm"
    WHITE_TOP = "White-mid-top.xpm"
    WHITE_BOTTOM = "White-mid-bottom.xpm"
    WHITE_LEFT = "White-mid-left.xpm"
    WHITE_RIGHT = "White-mid-right.xpm"
    INTERIOR_WALL = "interior_walls.xpm"
    KEY1 = "Key1.xpm"
    KEY2 = "Key2.xpm"
    KEY3 = "Key3.xpm"
    KEY4 = "Key4.xpm"
    DOOR1 = "door1.xpm"
    DOOR2 = "door2.xpm"
    HERO1 = "hero1.xpm"
    HERO2 = "hero2.xpm"
    HERO3 = "hero3.xpm"
    HERO4 = "hero4.xpm"
    STAIRS = "stairs.xpm"

    @property
    def filename(self) -> str:
        return self.value


@dataclass(frozen=True)
class Placement:
    """A sprite drawn with its top-left corner at pixel (x, y)."""

    sprite: Sprite
    x: int
    y: int


def _place(sprite: Sprite, col: int, row: int) -> Placement:
    return Placement(sprite, col * TILE_SIZE, row * TILE_SIZE)


def _cells(width: int, height: int) -> Iterator[tuple[int, int]]:
    if width <= 0 or height <= 0:
        raise ValueError("map dimensions must be positive")
    for row in range(height):
        for col in range(width):
            yield col, row


def background_tiles(width: int, height: int) -> list[Placement]:
    """Floor on every cell of a ``width`` by ``height`` tile grid."""
    return [_place(Sprite.FLOOR, col, row) for col, row in _cells(width, height)]


def wall_tiles(width: int, height: int) -> list[Placement]:
    """The outer walls, corners excluded."""
    last_col, last_row = width - 1, height - 1
    placed = []
    for col, row in _cells(width, height):
        inner_col = 0 < col < last_col
        inner_row = 0 < row < last_row
        if row == 0 and inner_col:
            placed.append(_place(Sprite.WALL_TOP, col, row))
        if col == 0 and inner_row:
            placed.append(_place(Sprite.WALL_LEFT, col, row))
        if col == last_col and inner_row:
            placed.append(_place(Sprite.WALL_RIGHT, col, row))
        if inner_col and row == last_row:
            placed.append(_place(Sprite.WALL_BOTTOM, col, row))
    return placed


def white_wall_tiles(width: int, height: int) -> list[Placement]:
    """The light inner edging, one tile inside the outer walls."""
    last_col, last_row = width - 1, height - 1
    placed = []
    for col, row in _cells(width, height):
        inner_col = 0 < col < last_col
        if row == 0 and inner_col:
            placed.append(_place(Sprite.WHITE_TOP, col, row + 1))
        if col == 0 and 0 < row < last_row:
            placed.append(_place(Sprite.WHITE_LEFT, col + 1, row))
        if col == last_col and 1 < row < last_row:
            placed.append(_place(Sprite.WHITE_RIGHT, col - 1, row))
        if inner_col and row == last_row:
            placed.append(_place(Sprite.WHITE_BOTTOM, col, row - 1))
    return placed


def corner_tiles(width: int, height: int) -> list[Placement]:
    """The four outer corners."""
    last_col, last_row = width - 1, height - 1
    placed = []
    for col, row in _cells(width, height):
        if col == 0 and row == last_row:
            placed.append(_place(Sprite.CORNER_BOTTOM_LEFT, col, row))
        if col == last_col and row == last_row:
            placed.append(_place(Sprite.CORNER_BOTTOM_RIGHT, col, row))
        if col == 0 and row == 0:
            placed.append(_place(Sprite.CORNER_TOP_LEFT, col, row))
        if col == last_col and row == 0:
            placed.append(_place(Sprite.CORNER_TOP_RIGHT, col, row))
    return placed


def white_corner_tiles(width: int, height: int) -> list[Placement]:
    """The light inner corners, one tile diagonally inside the outer ones."""
    last_col, last_row = width - 1, height - 1
    placed = []
    for col, row in _cells(width, height):
        if col == 0 and row == last_row:
            placed.append(_place(Sprite.WHITE_BOTTOM_LEFT, col + 1, row - 1))
        if col == last_col and row == last_row:
            placed.append(_place(Sprite.WHITE_BOTTOM_RIGHT, col - 1, row - 1))
        if col == 0 and row == 0:
            placed.append(_place(Sprite.WHITE_TOP_LEFT, col + 1, row + 1))
        if col == last_col and row == 0:
            placed.append(_place(Sprite.WHITE_TOP_RIGHT, col - 1, row + 1))
    return placed


_CONTENT_PASSES = (
    (WALL, Sprite.INTERIOR_WALL),
    (EXIT, Sprite.STAIRS),
    (COLLECTIBLE, Sprite.KEY1),
    (PLAYER, Sprite.HERO1),
)


def content_tiles(rows: Sequence[str]) -> list[Placement]:
    """Interior walls, exit, collectibles and hero, in that drawing order."""
    interior = [
        (col, row, rows[row][col])
        for row in range(1, len(rows) - 1)
        for col in range(1, len(rows[row]) - 1)
    ]
    return [
        _place(sprite, col, row)
        for tile, sprite in _CONTENT_PASSES
        for col, row, cell in interior
        if cell == tile
    ]


def base_scene(game_map: GameMap) -> list[Placement]:
    """Everything drawn when the map is first shown, in drawing order."""
    width, height = game_map.width, game_map.height
    return (
        background_tiles(width, height)
        + wall_tiles(width, height)
        + corner_tiles(width, height)
        + content_tiles(game_map.rows)
    )