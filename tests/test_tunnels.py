import random

import pytest

from burrow.dungeon.connectivity import is_connected
from burrow.dungeon.tunnels import Tunneler, l_shape_path, weighted_path
from burrow.dungeon.vectors import Vector2Int
from tests.dungeon_test_utils import steps_are_orthogonal

PAIRS = [
    ((0, 0), (5, 3)),
    ((5, 3), (0, 0)),
    ((2, 7), (2, 1)),
    ((-3, 4), (6, -2)),
    ((4, 0), (0, 9)),
    ((1, 1), (1, 1)),
]


@pytest.mark.parametrize("a,b", PAIRS)
def test_l_shape_length_and_endpoints(a, b):
    a, b = Vector2Int(*a), Vector2Int(*b)
    path = l_shape_path(a, b)
    assert len(path) == abs(a.x - b.x) + abs(a.y - b.y) + 1
    assert len(set(path)) == len(path)
    assert a in path and b in path
    assert is_connected(path)


def test_l_shape_same_point_is_single_tile():
    assert l_shape_path(Vector2Int(3, 3), Vector2Int(3, 3)) == [(3, 3)]


@pytest.mark.parametrize("a,b", PAIRS)
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_weighted_walk_is_monotone_and_excludes_target(a, b, seed):
    a, b = Vector2Int(*a), Vector2Int(*b)
    path = weighted_path(a, b, random.Random(seed))
    assert len(path) == a.manhattan(b)
    if not path:
        return
    assert path[0] == a
    assert b not in path
    assert steps_are_orthogonal(path)
    assert path[-1].manhattan(b) == 1
    dists = [p.manhattan(b) for p in path]
    assert dists == sorted(dists, reverse=True)


def test_weighted_same_point_is_empty():
    assert weighted_path(Vector2Int(2, 2), Vector2Int(2, 2), random.Random(0)) == []


def test_weighted_straight_line_never_leaves_axis():
    path = weighted_path(Vector2Int(0, 5), Vector2Int(6, 5), random.Random(9))
    assert path == [(x, 5) for x in range(6)]


def test_tunneler_dispatch_and_lookup():
    rng = random.Random(4)
    assert Tunneler("weighted") is Tunneler.WEIGHTED
    assert Tunneler("l_shape") is Tunneler.L_SHAPE
    assert len(Tunneler.L_SHAPE.connect((0, 0), (3, 4), rng)) == 8
    assert len(Tunneler.WEIGHTED.connect((0, 0), (3, 4), rng)) == 7
    with pytest.raises(ValueError):
        Tunneler("zigzag")
