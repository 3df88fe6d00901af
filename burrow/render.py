"""Rasterize a tile set.

``to_image`` draws one pixel per tile (floor on black) and scales the result
up with nearest-neighbour sampling; ``to_ascii`` returns the text dump.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple

from PIL import Image as PILImage

from .dungeon.dungeon import tile_bounds, tiles_to_ascii
from .dungeon.tiles import FLOOR_COLOR, ROCK_COLOR

Coord2D = Tuple[int, int]


def to_image(tiles: Iterable[Coord2D], scale: int = 4) -> PILImage.Image:
    tiles = set(tiles)
    if not tiles:
        raise ValueError("cannot render an empty tile set")
    if scale < 1:
        raise ValueError(f"scale must be >= 1 (got {scale})")
    lo, hi = tile_bounds(tiles)
    width = hi.x - lo.x + 1
    height = hi.y - lo.y + 1
    img = PILImage.new("RGB", (width, height), ROCK_COLOR)
    pixels = img.load()
    for x, y in tiles:
        pixels[x - lo.x, y - lo.y] = FLOOR_COLOR
    if scale == 1:
        return img
    return img.resize((width * scale, height * scale), PILImage.Resampling.NEAREST)


def save_png(tiles: Iterable[Coord2D], path: str | Path, scale: int = 4) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_image(tiles, scale).save(path, format="PNG")
    return path


def to_ascii(tiles: Iterable[Coord2D]) -> str:
    return tiles_to_ascii(set(tiles))


__all__ = ["to_image", "save_png", "to_ascii"]
