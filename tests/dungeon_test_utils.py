"""Shared helpers for dungeon tests."""

from burrow.dungeon.vectors import Vector2Int


def edges_form_tree(n, edges):
    """True when ``edges`` over nodes 0..n-1 is a spanning tree (n-1 edges, all connected)."""
    if len(edges) != max(0, n - 1):
        return False
    parent = list(range(n))

    def find(a):
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    for i, j in edges:
        ri, rj = find(i), find(j)
        if ri == rj:
            return False
        parent[ri] = rj
    return len({find(i) for i in range(n)}) <= 1


def steps_are_orthogonal(path):
    """Every consecutive pair of path tiles is one orthogonal step apart."""
    return all(Vector2Int(*a).manhattan(b) == 1 for a, b in zip(path, path[1:]))


def room_tile_total(areas):
    return sum(len(r.get_tiles()) for a in areas for r in a.rooms)


def bbox_area(tiles):
    xs = [t[0] for t in tiles]
    ys = [t[1] for t in tiles]
    return (max(xs) - min(xs) + 1) * (max(ys) - min(ys) + 1)
