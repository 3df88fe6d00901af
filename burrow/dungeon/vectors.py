"""Integer 2-D vector used for tile coordinates."""
from __future__ import annotations

from typing import NamedTuple, Tuple

ORTHO_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Vector2Int(NamedTuple):
    x: int
    y: int

    # tuple + / - mean concatenation; override for vector arithmetic
    def __add__(self, other) -> "Vector2Int":  # type: ignore[override]
        return Vector2Int(self.x + other[0], self.y + other[1])

    def __sub__(self, other) -> "Vector2Int":
        return Vector2Int(self.x - other[0], self.y - other[1])

    def vmin(self, other) -> "Vector2Int":
        return Vector2Int(min(self.x, other[0]), min(self.y, other[1]))

    def vmax(self, other) -> "Vector2Int":
        return Vector2Int(max(self.x, other[0]), max(self.y, other[1]))

    def manhattan(self, other) -> int:
        return abs(self.x - other[0]) + abs(self.y - other[1])

    def clamped(self) -> "Vector2Int":
        """Per-axis sign: each component becomes -1, 0 or 1."""
        return Vector2Int(_sign(self.x), _sign(self.y))


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


__all__ = ["Vector2Int", "ORTHO_DIRECTIONS"]
