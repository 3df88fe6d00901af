"""Corridor tracing between two tiles.

A tunneler turns a ``(start, end)`` pair into the ordered list of tiles the
corridor occupies.

* ``L_SHAPE``: one vertical run plus one horizontal run meeting at an elbow.
  Both endpoints are included; the path has ``|dx| + |dy| + 1`` tiles.
* ``WEIGHTED``: a random monotone walk. Each step moves along x or y with
  probability proportional to the distance still left on that axis, so the
  walk never overshoots. ``end`` itself is not emitted (the destination room
  already covers it); the path has ``|dx| + |dy|`` tiles.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional

from .vectors import Vector2Int

Path = List[Vector2Int]


def l_shape_path(a: Vector2Int, b: Vector2Int, rng: Optional[random.Random] = None) -> Path:
    d = b - a
    if d.x > d.y:
        hor_y, ver_x = a.y, b.x
    else:
        hor_y, ver_x = b.y, a.x

    ver = [Vector2Int(ver_x, y) for y in range(min(a.y, b.y), max(a.y, b.y) + 1)]
    # elbow tile already emitted by the vertical run
    hor = [Vector2Int(x, hor_y) for x in range(min(a.x, b.x), max(a.x, b.x) + 1) if x != ver_x]
    return ver + hor


def weighted_path(a: Vector2Int, b: Vector2Int, rng: random.Random) -> Path:
    cur = Vector2Int(*a)
    path: Path = []
    while cur != b:
        path.append(cur)
        rx = b.x - cur.x
        ry = b.y - cur.y
        # an axis with nothing left has zero weight and is never picked
        (axis,) = rng.choices((0, 1), weights=(abs(rx), abs(ry)))
        if axis == 0:
            cur = Vector2Int(cur.x + (1 if rx > 0 else -1), cur.y)
        else:
            cur = Vector2Int(cur.x, cur.y + (1 if ry > 0 else -1))
    return path


class Tunneler(Enum):
    L_SHAPE = "l_shape"
    WEIGHTED = "weighted"

    def connect(self, a: Vector2Int, b: Vector2Int, rng: random.Random) -> Path:
        a, b = Vector2Int(*a), Vector2Int(*b)
        if self is Tunneler.L_SHAPE:
            return l_shape_path(a, b, rng)
        return weighted_path(a, b, rng)


__all__ = ["Tunneler", "Path", "l_shape_path", "weighted_path"]
