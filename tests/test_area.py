import random

import pytest

from burrow.dungeon.area import Area
from burrow.dungeon.connections import Basic, Secondary
from burrow.dungeon.rooms import Chamber, Grow, GrowSeparated, Room
from burrow.dungeon.tunnels import Tunneler
from burrow.dungeon.vectors import Vector2Int


def _grown(seed=3, tunneler=Tunneler.L_SHAPE):
    area = Area(Grow(5, 3, 6), tunneler, Secondary(12))
    area.generate_rooms(random.Random(seed))
    return area


def _snapshot(area):
    return [(r.a, r.b) for r in area.rooms], [list(p) for p in area.paths]


def test_bounds_require_rooms():
    area = Area(Chamber(4, 4))
    with pytest.raises(ValueError):
        area.get_bounds()
    with pytest.raises(ValueError):
        area.shift(0, 0)


def test_chamber_area_bounds_and_size():
    area = Area(Chamber(5, 5))
    area.generate_rooms(random.Random(0))
    assert len(area.rooms) == 1
    assert area.paths == []
    assert area.get_bounds() == ((0, 0), (4, 4))
    assert area.get_size() == (4, 4)
    assert len(area.get_tiles()) == 25


def test_generate_realizes_every_mandatory_edge():
    area = Area(GrowSeparated(6, 3, 5), Tunneler.WEIGHTED, Basic())
    area.generate_rooms(random.Random(17))
    assert len(area.rooms) == 6
    assert len(area.connections) == 5
    assert len(area.paths) == 5


def test_regenerate_replaces_layout():
    area = _grown(seed=1)
    area.generate_rooms(random.Random(2))
    fresh = _grown(seed=2)
    assert _snapshot(area) == _snapshot(fresh)


@pytest.mark.parametrize("bx,by", [(0, 0), (10, 20), (-7, 3), (100, -40)])
def test_shift_moves_min_bound(bx, by):
    area = _grown()
    before = area.get_tiles()
    lo, _ = area.get_bounds()
    area.shift(bx, by)
    assert area.get_bounds()[0] == (bx, by)
    d = Vector2Int(bx - lo.x, by - lo.y)
    assert area.get_tiles() == {t + d for t in before}


def test_shift_is_idempotent():
    area = _grown()
    area.shift(12, 5)
    once = _snapshot(area)
    area.shift(12, 5)
    assert _snapshot(area) == once


def test_shifts_compose():
    a = _grown(seed=9)
    b = _grown(seed=9)
    a.shift(30, -4)
    a.shift(3, 7)
    b.shift(3, 7)
    assert _snapshot(a) == _snapshot(b)


def test_shift_keeps_size():
    area = _grown(seed=4)
    size = area.get_size()
    area.shift(-50, 50)
    assert area.get_size() == size


def test_closest_rooms_by_corner_distance():
    mine = Area(Chamber(3, 3))
    mine.rooms = [Room(Vector2Int(0, 0), Vector2Int(2, 2)), Room(Vector2Int(10, 0), Vector2Int(12, 2))]
    theirs = Area(Chamber(3, 3))
    theirs.rooms = [Room(Vector2Int(20, 0), Vector2Int(22, 2)), Room(Vector2Int(14, 0), Vector2Int(16, 2))]
    ra, rb = mine.get_closest_rooms(theirs)
    assert ra is mine.rooms[1]
    assert rb is theirs.rooms[1]


def test_join_is_read_only_and_links_both_areas():
    a = _grown(seed=5)
    b = _grown(seed=6)
    b.shift(a.get_bounds()[1].x + 3, 0)
    before_a, before_b = _snapshot(a), _snapshot(b)
    path = a.join(b, random.Random(0))
    assert _snapshot(a) == before_a
    assert _snapshot(b) == before_b
    ra, rb = a.get_closest_rooms(b)
    assert any(t in ra.get_tiles() for t in path)
    assert any(t in rb.get_tiles() for t in path)


def test_join_requires_generated_areas():
    a = _grown()
    with pytest.raises(ValueError):
        a.join(Area(Chamber(3, 3)), random.Random(0))
