import pytest

from sogame.layout import (
    TILE_SIZE,
    Placement,
    Sprite,
    background_tiles,
    base_scene,
    content_tiles,
    corner_tiles,
    white_corner_tiles,
    white_wall_tiles,
    wall_tiles,
)
from sogame.mapcheck import parse_map

MAP_TEXT = "111111\n1P1CE1\n10C001\n111111"


def test_sprite_file_names():
    assert Sprite("White.xpm") is Sprite.FLOOR
    assert background_tiles(1, 1)[0].sprite.filename == "White.xpm"
    placed = content_tiles(parse_map(MAP_TEXT).rows)
    files = {p.sprite.value for p in placed}
    assert "stairs.xpm" in files
    assert "interior_walls.xpm" in files


def test_background_covers_every_cell():
    placed = background_tiles(4, 3)
    assert len(placed) == 4 * 3
    assert {p.sprite for p in placed} == {Sprite.FLOOR}
    assert {(p.x, p.y) for p in placed} == {
        (col * TILE_SIZE, row * TILE_SIZE) for col in range(4) for row in range(3)
    }


def test_background_rejects_empty_grid():
    with pytest.raises(ValueError):
        background_tiles(0, 3)


def test_wall_tiles_skip_corners():
    width, height = 5, 4
    placed = wall_tiles(width, height)
    corners = {(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)}
    cells = {(p.x // TILE_SIZE, p.y // TILE_SIZE) for p in placed}
    assert not cells & corners
    assert len(placed) == 2 * (width - 2) + 2 * (height - 2)
    assert all(p.sprite is Sprite.WALL_TOP for p in placed if p.y == 0)
    assert all(p.sprite is Sprite.WALL_LEFT for p in placed if p.x == 0)


def test_corner_tiles():
    width, height = 5, 4
    placed = corner_tiles(width, height)
    positions = {p.sprite: (p.x, p.y) for p in placed}
    assert positions[Sprite.CORNER_TOP_LEFT] == (0, 0)
    assert positions[Sprite.CORNER_TOP_RIGHT] == ((width - 1) * TILE_SIZE, 0)
    assert positions[Sprite.CORNER_BOTTOM_LEFT] == (0, (height - 1) * TILE_SIZE)
    assert positions[Sprite.CORNER_BOTTOM_RIGHT] == (
        (width - 1) * TILE_SIZE,
        (height - 1) * TILE_SIZE,
    )


def test_white_tiles_lie_inside_walls():
    width, height = 6, 5
    placed = white_wall_tiles(width, height) + white_corner_tiles(width, height)
    for p in placed:
        assert TILE_SIZE <= p.x <= (width - 2) * TILE_SIZE
        assert TILE_SIZE <= p.y <= (height - 2) * TILE_SIZE


def test_white_corner_top_left_is_diagonal():
    placed = white_corner_tiles(5, 4)
    top_left = [p for p in placed if p.sprite is Sprite.WHITE_TOP_LEFT]
    assert top_left == [Placement(Sprite.WHITE_TOP_LEFT, TILE_SIZE, TILE_SIZE)]


def test_content_tiles_order_and_sprites():
    game_map = parse_map(MAP_TEXT)
    placed = content_tiles(game_map.rows)
    sprites = [p.sprite for p in placed]
    assert sprites == [
        Sprite.INTERIOR_WALL,
        Sprite.STAIRS,
        Sprite.KEY1,
        Sprite.KEY1,
        Sprite.HERO1,
    ]
    hero = placed[-1]
    px, py = game_map.player
    assert (hero.x, hero.y) == (px * TILE_SIZE, py * TILE_SIZE)
    ex, ey = game_map.exit
    assert Placement(Sprite.STAIRS, ex * TILE_SIZE, ey * TILE_SIZE) in placed


def test_base_scene_draw_order():
    game_map = parse_map(MAP_TEXT)
    width, height = game_map.width, game_map.height
    scene = base_scene(game_map)
    background = background_tiles(width, height)
    assert scene[: len(background)] == background
    assert scene[-len(content_tiles(game_map.rows)):] == content_tiles(game_map.rows)
    assert len(scene) == (
        len(background)
        + len(wall_tiles(width, height))
        + len(corner_tiles(width, height))
        + len(content_tiles(game_map.rows))
    )