import pytest

from burrow.dungeon.tiles import FLOOR_COLOR, ROCK_COLOR
from burrow.render import save_png, to_ascii, to_image


def test_image_maps_tiles_to_pixels():
    img = to_image({(0, 0), (2, 1)}, scale=1)
    assert img.size == (3, 2)
    assert img.getpixel((0, 0)) == FLOOR_COLOR
    assert img.getpixel((2, 1)) == FLOOR_COLOR
    assert img.getpixel((1, 0)) == ROCK_COLOR


def test_image_offsets_negative_coordinates_and_scales():
    img = to_image({(-3, -1), (0, 0)}, scale=3)
    assert img.size == (12, 6)
    assert img.getpixel((0, 0)) == FLOOR_COLOR
    assert img.getpixel((11, 5)) == FLOOR_COLOR
    assert img.getpixel((5, 0)) == ROCK_COLOR


def test_empty_and_bad_scale_rejected():
    with pytest.raises(ValueError):
        to_image(set())
    with pytest.raises(ValueError):
        to_image({(0, 0)}, scale=0)


def test_save_png(tmp_path):
    path = save_png({(0, 0), (1, 0)}, tmp_path / "maps" / "img_0.png", scale=2)
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_ascii_dump():
    assert to_ascii({(0, 0), (2, 0), (2, 1)}) == ".#.\n##."
