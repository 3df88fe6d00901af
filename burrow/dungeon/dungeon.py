"""Dungeon assembly: areas laid out on a grid and stitched together.

Generation phases (``Dungeon.generate``):
    * generate: every area builds its own rooms and corridors.
    * position: areas are packed into a row/column grid. A column is as wide
      as its widest area plus ``spacing``; a row as tall as its tallest area
      plus ``spacing``. Each area is shifted to its cell's offset.
    * write: room and corridor tiles of every area are merged into ``tiles``.
    * connect: every cell is joined to its left neighbour and to the cell
      above it, using the nearest pair of rooms across the two areas.

Areas are assigned to cells round-robin over ``row_count`` rows as they are
added: area ``i`` goes to row ``i % row_count``, column ``i // row_count``.
Rows may end up with different lengths; layout only looks at cells that
exist.
"""

from __future__ import annotations

import random
import time
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from ..logging_utils import get_logger
from .area import Area
from .connectivity import connected_components
from .metrics import init_metrics
from .tiles import FLOOR, ROCK
from .tunnels import Path
from .vectors import Vector2Int

log = get_logger("burrow.dungeon")

Cell = Tuple[int, int]  # (row, column)

DEFAULT_SPACING = 2


class Dungeon:
    def __init__(
        self,
        row_count: int = 2,
        *,
        spacing: int = DEFAULT_SPACING,
        seed: Optional[int] = None,
        enable_metrics: bool = True,
    ):
        if row_count < 1:
            raise ValueError(f"row_count must be >= 1 (got {row_count})")
        if spacing < 1:
            raise ValueError(f"spacing must be >= 1 (got {spacing})")
        self.row_count = row_count
        self.spacing = spacing
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        # Local RNG so outside random usage does not affect generation
        self._rng = random.Random(seed)
        self.enable_metrics = enable_metrics
        self.areas: List[Area] = []
        self.rows: List[List[int]] = [[] for _ in range(row_count)]
        self.grid: Dict[Cell, int] = {}
        self.tiles: Set[Vector2Int] = set()
        self.inter_area_paths: List[Path] = []
        self.metrics: Dict[str, Any] = init_metrics() if enable_metrics else {}

    def add_area(self, area: Area) -> int:
        idx = len(self.areas)
        self.areas.append(area)
        self.rows[idx % self.row_count].append(idx)
        return idx

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self) -> Set[Vector2Int]:
        if not self.areas:
            raise ValueError("dungeon has no areas to generate")
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times: Dict[str, int] = {}

            def _phase(label: str, fn: Callable, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = int((time.perf_counter() - ps) * 1000)
                return r
        else:
            def _phase(label: str, fn: Callable, *a, **k):
                return fn(*a, **k)

        self.tiles = set()
        self.inter_area_paths = []
        _phase('generate', self._generate_areas)
        _phase('position', self._position_areas)
        _phase('write', self._write_areas)
        _phase('connect', self._connect_areas)

        if self.enable_metrics:
            self._collect_metrics()
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            self.metrics['phase_ms'] = phase_times
            if self.metrics['components'] != 1:
                log.warn(event="dungeon_disconnected", seed=self.seed, components=self.metrics['components'])
        log.info(
            event="dungeon_generated",
            seed=self.seed,
            areas=len(self.areas),
            tiles=len(self.tiles),
            runtime_ms=self.metrics.get('runtime_ms'),
        )
        return self.tiles

    def _generate_areas(self) -> None:
        for area in self.areas:
            area.generate_rooms(self._rng)

    def _build_grid(self) -> Dict[Cell, int]:
        grid: Dict[Cell, int] = {}
        for r, row in enumerate(self.rows):
            for c, idx in enumerate(row):
                grid[(r, c)] = idx
        return grid

    def _position_areas(self) -> None:
        self.grid = self._build_grid()
        column_count = 1 + max(c for _, c in self.grid)
        row_count = 1 + max(r for r, _ in self.grid)
        column_widths = [0] * column_count
        row_heights = [0] * row_count
        for (r, c), idx in self.grid.items():
            size = self.areas[idx].get_size()
            column_widths[c] = max(column_widths[c], size.x + self.spacing)
            row_heights[r] = max(row_heights[r], size.y + self.spacing)
        column_shifts = [sum(column_widths[:i]) for i in range(column_count)]
        row_shifts = [sum(row_heights[:i]) for i in range(row_count)]
        for (r, c), idx in self.grid.items():
            self.areas[idx].shift(column_shifts[c], row_shifts[r])
        log.debug(event="areas_positioned", columns=column_count, rows=row_count)

    def _write_areas(self) -> None:
        for area in self.areas:
            self.tiles.update(area.get_tiles())

    def _connect_areas(self) -> None:
        for (r, c), idx in sorted(self.grid.items()):
            area = self.areas[idx]
            neighbours = []
            if (r, c - 1) in self.grid:
                neighbours.append(self.grid[(r, c - 1)])
            if (r - 1, c) in self.grid:
                neighbours.append(self.grid[(r - 1, c)])
            for other in neighbours:
                path = area.join(self.areas[other], self._rng)
                self.inter_area_paths.append(path)
                self.tiles.update(path)
                log.debug(event="areas_joined", cell=f"{r},{c}", other=other, length=len(path))

    def _collect_metrics(self) -> None:
        self.metrics['areas'] = len(self.areas)
        self.metrics['rooms'] = sum(len(a.rooms) for a in self.areas)
        self.metrics['paths'] = sum(len(a.paths) for a in self.areas)
        self.metrics['inter_area_paths'] = len(self.inter_area_paths)
        self.metrics['tiles'] = len(self.tiles)
        self.metrics['components'] = len(connected_components(self.tiles))

    # ------------------------------------------------------------------
    # Tile set helpers (rasterizer interface)
    # ------------------------------------------------------------------
    def get_bounds(self) -> Tuple[Vector2Int, Vector2Int]:
        if not self.tiles:
            raise ValueError("dungeon has no tiles; call generate() first")
        return tile_bounds(self.tiles)

    def get_size(self) -> Vector2Int:
        lo, hi = self.get_bounds()
        return hi - lo

    def to_ascii(self) -> str:
        return tiles_to_ascii(self.tiles)


def tile_bounds(tiles) -> Tuple[Vector2Int, Vector2Int]:
    xs = [t[0] for t in tiles]
    ys = [t[1] for t in tiles]
    return Vector2Int(min(xs), min(ys)), Vector2Int(max(xs), max(ys))


def tiles_to_ascii(tiles) -> str:
    """One line per row, FLOOR for occupied tiles and ROCK elsewhere."""
    if not tiles:
        raise ValueError("cannot render an empty tile set")
    lo, hi = tile_bounds(tiles)
    lines = []
    for y in range(lo.y, hi.y + 1):
        lines.append("".join(FLOOR if (x, y) in tiles else ROCK for x in range(lo.x, hi.x + 1)))
    return "\n".join(lines)


__all__ = ["Dungeon", "tile_bounds", "tiles_to_ascii", "DEFAULT_SPACING"]
