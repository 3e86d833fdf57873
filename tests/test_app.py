import os
from unittest import mock

import pygame
import pytest

from sogame.app import USAGE, SpriteSet, load_sprites, main
from sogame.layout import Sprite
from sogame.mapcheck import IMPOSSIBLE_MAP, INVALID_MAP, WRONG_MAP
from sogame.xpm import XpmError

SAMPLE_XPM = """/* XPM */
static char *img[] = {
"2 1 2 1",
"r c #FF0000",
". c None",
"r."
};
"""

VALID_MAP = "1111111\n1P0C0E1\n1111111"


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "img"
    directory.mkdir()
    for sprite in Sprite:
        (directory / sprite.filename).write_text(SAMPLE_XPM)
    return directory


def test_load_sprites_gives_every_sprite(image_dir):
    sprites = load_sprites(image_dir)
    assert all(sprites.surface(sprite).get_size() == (2, 1) for sprite in Sprite)


def test_load_sprites_pixel_colours(image_dir):
    surface = load_sprites(image_dir).surface(Sprite.FLOOR)
    assert surface.get_at((0, 0)) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_sprites_missing_file(image_dir):
    (image_dir / Sprite.STAIRS.filename).unlink()
    with pytest.raises(XpmError):
        load_sprites(image_dir)


def test_sprite_set_lookup():
    surf = pygame.Surface((3, 3))
    sprites = SpriteSet({Sprite.FLOOR: surf})
    assert sprites.surface(Sprite.FLOOR) is surf
    with pytest.raises(KeyError):
        sprites.surface(Sprite.STAIRS)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == USAGE


def test_main_with_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().out == USAGE


def test_main_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().err == f"Error\n{WRONG_MAP}\n"


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1PX1\n1111")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == f"Error\n{INVALID_MAP}\n"


def test_main_impossible_map(tmp_path, capsys):
    path = tmp_path / "blocked.ber"
    path.write_text("1111111\n1P01CE1\n1111111")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == f"Error\n{IMPOSSIBLE_MAP}\n"


def test_main_missing_images(tmp_path, capsys, monkeypatch):
    path = tmp_path / "ok.ber"
    path.write_text(VALID_MAP)
    monkeypatch.chdir(tmp_path)
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_main_without_environment(capsys):
    with mock.patch.dict(os.environ, clear=True):
        result = main(["map.ber"])
    assert result == 1
    assert capsys.readouterr().out == ""