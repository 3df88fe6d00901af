"""
project: Burrow
module: dungeon_api.py
License: MIT

Dungeon generation API routes.

Query parameters for both map endpoints: ``seed`` plus any DungeonConfig
field (``row_count``, ``area_count``, ``room_generator``, ``tunneler``, ...).
Unspecified fields fall back to BURROW_* environment settings, then to the
config defaults. Size-related fields above the app's BURROW_MAX_* ceilings
are rejected with a 400 before anything is generated.
"""

import io
import random
import threading

from flask import Blueprint, current_app, jsonify, request, send_file

from burrow.dungeon import Dungeon, DungeonConfig, generate_dungeon
from burrow.logging_utils import get_logger
from burrow.render import to_image

log = get_logger("burrow.api")

# Simple in-process cache config-key -> Dungeon. Guarded by a lock because the
# dev server may handle requests on several threads.
_dungeon_cache = {}
_dungeon_cache_lock = threading.Lock()

# config field -> app config key holding its request ceiling
FIELD_CEILINGS = {
    "area_count": "BURROW_MAX_AREAS",
    "row_count": "BURROW_MAX_ROWS",
    "area_spacing": "BURROW_MAX_SPACING",
    "max_size": "BURROW_MAX_ROOM_SIZE",
    "room_count": "BURROW_MAX_ROOM_COUNT",
    "max_placement_attempts": "BURROW_MAX_ATTEMPTS",
}


def _config_from_request() -> DungeonConfig:
    cfg = DungeonConfig.from_mapping(request.args.to_dict(), base=DungeonConfig.from_env())
    if cfg.seed is None:
        # fix the seed up front so the cache key and response agree
        cfg = DungeonConfig.from_mapping({"seed": _random_seed()}, base=cfg)
    cfg.validate()
    ceilings = {
        field: current_app.config[key] for field, key in FIELD_CEILINGS.items() if key in current_app.config
    }
    return cfg.check_ceilings(ceilings)


def _random_seed() -> int:
    return random.randint(0, 2**31 - 1)


def get_cached_dungeon(config: DungeonConfig) -> Dungeon:
    if current_app.config.get("BURROW_DISABLE_CACHE"):
        return generate_dungeon(config)
    key = tuple(sorted(config.as_dict().items()))
    with _dungeon_cache_lock:
        dungeon = _dungeon_cache.get(key)
        if dungeon is not None:
            return dungeon
    dungeon = generate_dungeon(config)
    with _dungeon_cache_lock:
        _dungeon_cache[key] = dungeon
        cap = current_app.config.get("BURROW_CACHE_MAX", 8)
        while len(_dungeon_cache) > cap:
            first_key = next(iter(_dungeon_cache.keys()))
            _dungeon_cache.pop(first_key, None)
    return dungeon


bp_dungeon = Blueprint("dungeon", __name__)


@bp_dungeon.route("/api/dungeon/map")
def dungeon_map():
    """
    Generate (or fetch from cache) a dungeon and return it as text rows.
    Response: { 'seed', 'origin': [x, y], 'width', 'height', 'rows': [str], 'tile_count', 'metrics' }
    """
    cfg = _config_from_request()
    dungeon = get_cached_dungeon(cfg)
    lo, hi = dungeon.get_bounds()
    log.info(event="map_served", seed=dungeon.seed, tiles=len(dungeon.tiles))
    return jsonify(
        {
            "seed": dungeon.seed,
            "origin": [lo.x, lo.y],
            "width": hi.x - lo.x + 1,
            "height": hi.y - lo.y + 1,
            "rows": dungeon.to_ascii().split("\n"),
            "tile_count": len(dungeon.tiles),
            "metrics": dungeon.metrics,
        }
    )


@bp_dungeon.route("/api/dungeon/map.png")
def dungeon_png():
    """Rendered PNG of the dungeon; ``scale`` (default 4) sets pixels per tile."""
    scale_raw = request.args.get("scale", "4")
    try:
        scale = int(scale_raw)
    except ValueError:
        return jsonify({"error": f"scale must be an integer (got {scale_raw!r})"}), 400
    max_scale = current_app.config.get("BURROW_MAX_SCALE", 16)
    if not 1 <= scale <= max_scale:
        return jsonify({"error": f"scale must be between 1 and {max_scale}"}), 400
    cfg = _config_from_request()
    dungeon = get_cached_dungeon(cfg)
    buf = io.BytesIO()
    to_image(dungeon.tiles, scale).save(buf, format="PNG")
    buf.seek(0)
    return send_file(buf, mimetype="image/png", download_name=f"dungeon_{dungeon.seed}.png")
