"""Rectangular rooms and the generators that lay them out inside an area.

A room generator returns ``(rooms, connections)`` where ``connections`` is a
list of ``(i, j)`` index pairs into ``rooms`` that must be joined by a
corridor. For the growth generators the connections form a tree rooted at
the first (seed) room, so every room is reachable from it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Tuple, Union

from ..logging_utils import get_logger
from .vectors import Vector2Int

log = get_logger("burrow.rooms")

Edge = Tuple[int, int]

# Extra clearance kept around every existing room by GrowSeparated
SEPARATION_BORDER = 2
DEFAULT_MAX_ATTEMPTS = 1000


class RoomPlacementError(RuntimeError):
    """Raised when a growth generator runs out of attempts to place a room."""

    def __init__(self, placed: int, requested: int, attempts: int):
        super().__init__(
            f"could not place room {placed + 1} of {requested} after {attempts} attempts"
        )
        self.placed = placed
        self.requested = requested
        self.attempts = attempts


@dataclass
class Room:
    a: Vector2Int
    b: Vector2Int

    def __post_init__(self):
        a, b = Vector2Int(*self.a), Vector2Int(*self.b)
        self.a = a.vmin(b)
        self.b = a.vmax(b)

    @property
    def width(self) -> int:
        return self.b.x - self.a.x + 1

    @property
    def height(self) -> int:
        return self.b.y - self.a.y + 1

    @property
    def center(self) -> Vector2Int:
        return Vector2Int((self.a.x + self.b.x) // 2, (self.a.y + self.b.y) // 2)

    def corners(self) -> Tuple[Vector2Int, Vector2Int, Vector2Int, Vector2Int]:
        return (
            Vector2Int(self.a.x, self.a.y),
            Vector2Int(self.b.x, self.a.y),
            Vector2Int(self.b.x, self.b.y),
            Vector2Int(self.a.x, self.b.y),
        )

    def random_point(self, rng: random.Random) -> Vector2Int:
        return Vector2Int(rng.randint(self.a.x, self.b.x), rng.randint(self.a.y, self.b.y))

    def intersects(self, other: "Room", border: int = 0) -> bool:
        """True when the two rectangles overlap once ``self`` is inflated by ``border``."""
        return not (
            other.a.x > self.b.x + border
            or other.b.x < self.a.x - border
            or other.a.y > self.b.y + border
            or other.b.y < self.a.y - border
        )

    def cells(self) -> Iterator[Vector2Int]:
        for y in range(self.a.y, self.b.y + 1):
            for x in range(self.a.x, self.b.x + 1):
                yield Vector2Int(x, y)

    def get_tiles(self) -> Set[Vector2Int]:
        return set(self.cells())

    def translate(self, delta: Vector2Int) -> None:
        self.a = self.a + delta
        self.b = self.b + delta

    def corner_distance(self, other: "Room") -> int:
        """Smallest Manhattan distance between any corner of ``self`` and any corner of ``other``."""
        return min(ca.manhattan(cb) for ca in self.corners() for cb in other.corners())

    def join(self, other: "Room", tunneler, rng: random.Random) -> List[Vector2Int]:
        """Corridor from a random point of this room to a random point of ``other``."""
        start = self.random_point(rng)
        end = other.random_point(rng)
        return tunneler.connect(start, end, rng)


def _check_sizes(min_size: int, max_size: int) -> None:
    if min_size < 1:
        raise ValueError(f"min_size must be >= 1 (got {min_size})")
    if min_size > max_size:
        raise ValueError(f"min_size ({min_size}) must not exceed max_size ({max_size})")


def _random_dim(rng: random.Random, min_size: int, max_size: int) -> int:
    return rng.randint(min_size, max_size)


def _seed_room(rng: random.Random, min_size: int, max_size: int) -> Room:
    # sizes count tiles, corners are inclusive
    w = _random_dim(rng, min_size, max_size)
    h = _random_dim(rng, min_size, max_size)
    return Room(Vector2Int(0, 0), Vector2Int(w - 1, h - 1))


def grow_rooms(
    rng: random.Random,
    count: int,
    min_size: int,
    max_size: int,
    border: int = 0,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Tuple[List[Room], List[Edge]]:
    """Grow ``count`` rooms outward from a seed room.

    Each new room picks a random existing room as reference, samples its first
    corner in a window around the reference centre and extends away from it.
    Candidates intersecting any placed room (inflated by ``border``) are
    resampled, up to ``max_attempts`` times per room.
    """
    _check_sizes(min_size, max_size)
    if count < 0:
        raise ValueError(f"count must be >= 0 (got {count})")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1 (got {max_attempts})")

    rooms = [_seed_room(rng, min_size, max_size)]
    connections: List[Edge] = []
    # search window for the new room's first corner
    d = max_size + border

    for _ in range(count - 1):
        placed = False
        for _attempt in range(max_attempts):
            ref_idx = rng.randrange(len(rooms))
            c = rooms[ref_idx].center
            corner = Vector2Int(rng.randint(c.x - d, c.x + d), rng.randint(c.y - d, c.y + d))

            # extend outward from the reference room; never along its axis
            dx, dy = (corner - c).clamped()
            if dx == 0:
                dx = rng.choice((-1, 1))
            if dy == 0:
                dy = rng.choice((-1, 1))

            w = _random_dim(rng, min_size, max_size)
            h = _random_dim(rng, min_size, max_size)
            candidate = Room(corner, corner + Vector2Int(dx * (w - 1), dy * (h - 1)))
            if any(other.intersects(candidate, border) for other in rooms):
                continue
            connections.append((ref_idx, len(rooms)))
            rooms.append(candidate)
            placed = True
            break
        if not placed:
            log.error(
                event="room_placement_failed",
                placed=len(rooms),
                requested=count,
                attempts=max_attempts,
                border=border,
            )
            raise RoomPlacementError(len(rooms), count, max_attempts)
    return rooms, connections


@dataclass(frozen=True)
class Chamber:
    """A single room at the origin."""

    min_size: int
    max_size: int

    def generate(self, rng: random.Random) -> Tuple[List[Room], List[Edge]]:
        _check_sizes(self.min_size, self.max_size)
        return [_seed_room(rng, self.min_size, self.max_size)], []


@dataclass(frozen=True)
class Grow:
    """Rooms grown next to each other; rooms may touch."""

    count: int
    min_size: int
    max_size: int
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def generate(self, rng: random.Random) -> Tuple[List[Room], List[Edge]]:
        return grow_rooms(rng, self.count, self.min_size, self.max_size, 0, self.max_attempts)


@dataclass(frozen=True)
class GrowSeparated:
    """Like Grow but keeps a gap of SEPARATION_BORDER tiles around every room."""

    count: int
    min_size: int
    max_size: int
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def generate(self, rng: random.Random) -> Tuple[List[Room], List[Edge]]:
        return grow_rooms(
            rng, self.count, self.min_size, self.max_size, SEPARATION_BORDER, self.max_attempts
        )


RoomGenerator = Union[Chamber, Grow, GrowSeparated]


def bounds_of(rooms: List[Room]) -> Tuple[Vector2Int, Vector2Int]:
    if not rooms:
        raise ValueError("cannot compute bounds of an empty room list")
    lo: Optional[Vector2Int] = None
    hi: Optional[Vector2Int] = None
    for r in rooms:
        lo = r.a if lo is None else lo.vmin(r.a)
        hi = r.b if hi is None else hi.vmax(r.b)
    return lo, hi


__all__ = [
    "Room",
    "RoomGenerator",
    "RoomPlacementError",
    "Chamber",
    "Grow",
    "GrowSeparated",
    "grow_rooms",
    "bounds_of",
    "SEPARATION_BORDER",
    "DEFAULT_MAX_ATTEMPTS",
]
