"""A single independently generated block of rooms and corridors."""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from ..logging_utils import get_logger
from .connections import Basic, ConnectionStrategy
from .rooms import Edge, Room, RoomGenerator, bounds_of
from .tunnels import Path, Tunneler
from .vectors import Vector2Int

log = get_logger("burrow.area")


class Area:
    def __init__(
        self,
        room_generator: RoomGenerator,
        tunneler: Tunneler = Tunneler.L_SHAPE,
        connection: Optional[ConnectionStrategy] = None,
    ):
        self.room_generator = room_generator
        self.tunneler = tunneler
        self.connection = connection if connection is not None else Basic()
        self.rooms: List[Room] = []
        self.paths: List[Path] = []
        self.connections: List[Edge] = []

    def __repr__(self) -> str:
        return f"Area(rooms={len(self.rooms)}, paths={len(self.paths)}, generator={self.room_generator!r})"

    def generate_rooms(self, rng: random.Random) -> None:
        """Replace any previous layout with a freshly generated one."""
        rooms, connections = self.room_generator.generate(rng)
        self.paths = self.connection.plan(rooms, connections, self.tunneler, rng)
        self.rooms = rooms
        self.connections = connections
        log.debug(
            event="area_generated",
            rooms=len(rooms),
            connections=len(connections),
            paths=len(self.paths),
        )

    def get_bounds(self) -> Tuple[Vector2Int, Vector2Int]:
        """(min corner, max corner) over all rooms; paths are not included."""
        if not self.rooms:
            raise ValueError("area has no rooms; call generate_rooms() first")
        return bounds_of(self.rooms)

    def get_size(self) -> Vector2Int:
        lo, hi = self.get_bounds()
        return hi - lo

    def shift(self, base_x: int, base_y: int) -> None:
        """Translate the area so its minimum bound lands on (base_x, base_y)."""
        lo, _ = self.get_bounds()
        d = Vector2Int(base_x - lo.x, base_y - lo.y)
        if d == (0, 0):
            return
        for room in self.rooms:
            room.translate(d)
        self.paths = [[v + d for v in path] for path in self.paths]

    def get_tiles(self) -> Set[Vector2Int]:
        tiles: Set[Vector2Int] = set()
        for room in self.rooms:
            tiles.update(room.cells())
        for path in self.paths:
            tiles.update(path)
        return tiles

    def get_closest_rooms(self, other: "Area") -> Tuple[Room, Room]:
        """Room pair (mine, theirs) with the smallest corner-to-corner distance.

        Ties go to the pair encountered first, iterating this area's rooms in
        the outer loop.
        """
        if not self.rooms or not other.rooms:
            raise ValueError("both areas need rooms before they can be joined")
        best = None
        best_d = None
        for ra in self.rooms:
            for rb in other.rooms:
                d = ra.corner_distance(rb)
                if best_d is None or d < best_d:
                    best, best_d = (ra, rb), d
        return best

    def join(self, other: "Area", rng: random.Random) -> Path:
        """Corridor linking the nearest rooms of the two areas. Neither area is modified."""
        ra, rb = self.get_closest_rooms(other)
        return ra.join(rb, self.tunneler, rng)


__all__ = ["Area"]
