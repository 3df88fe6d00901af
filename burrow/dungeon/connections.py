"""Strategies turning a room graph into corridor paths."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Sequence, Union

from ..logging_utils import get_logger
from .rooms import Edge, Room
from .tunnels import Path, Tunneler

log = get_logger("burrow.connections")


def _mandatory_paths(
    rooms: Sequence[Room], edges: Sequence[Edge], tunneler: Tunneler, rng: random.Random
) -> List[Path]:
    return [rooms[i].join(rooms[j], tunneler, rng) for i, j in edges]


@dataclass(frozen=True)
class Basic:
    """One corridor per mandatory edge."""

    def plan(
        self, rooms: Sequence[Room], edges: Sequence[Edge], tunneler: Tunneler, rng: random.Random
    ) -> List[Path]:
        return _mandatory_paths(rooms, edges, tunneler, rng)


@dataclass(frozen=True)
class Secondary:
    """Mandatory corridors plus one random extra link per room, kept only if short.

    For every room a random other room is picked and tunnelled to; the path
    is kept when it has at most ``max_dist`` tiles. Rejected links are dropped.
    """

    max_dist: int

    def plan(
        self, rooms: Sequence[Room], edges: Sequence[Edge], tunneler: Tunneler, rng: random.Random
    ) -> List[Path]:
        paths = _mandatory_paths(rooms, edges, tunneler, rng)
        dropped = 0
        for i in range(len(rooms)):
            j = rng.randrange(len(rooms))
            if i == j:
                continue
            path = rooms[i].join(rooms[j], tunneler, rng)
            if path and len(path) <= self.max_dist:
                paths.append(path)
            else:
                dropped += 1
        log.debug(
            event="secondary_links",
            mandatory=len(edges),
            added=len(paths) - len(edges),
            dropped=dropped,
        )
        return paths


ConnectionStrategy = Union[Basic, Secondary]

__all__ = ["Basic", "Secondary", "ConnectionStrategy"]
