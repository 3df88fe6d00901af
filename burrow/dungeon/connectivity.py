"""Connectivity checks over a set of floor tiles.

Flood fill uses 4-directional adjacency; diagonal contact does not connect.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable, List, Set, Tuple

from .vectors import ORTHO_DIRECTIONS

Coord2D = Tuple[int, int]


def flood_fill(tiles: Iterable[Coord2D], start: Coord2D) -> Set[Coord2D]:
    """Tiles reachable from ``start`` through orthogonal steps over ``tiles``."""
    floor = tiles if isinstance(tiles, (set, frozenset)) else set(tiles)
    start = (start[0], start[1])
    if start not in floor:
        return set()
    visited = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in ORTHO_DIRECTIONS:
            n = (cx + dx, cy + dy)
            if n in floor and n not in visited:
                visited.add(n)
                q.append(n)
    return visited


def connected_components(tiles: Iterable[Coord2D]) -> List[Set[Coord2D]]:
    remaining = {(t[0], t[1]) for t in tiles}
    components: List[Set[Coord2D]] = []
    while remaining:
        seed = next(iter(remaining))
        comp = flood_fill(remaining, seed)
        components.append(comp)
        remaining -= comp
    return components


def is_connected(tiles: Iterable[Coord2D]) -> bool:
    return len(connected_components(tiles)) <= 1


__all__ = ["flood_fill", "connected_components", "is_connected"]
