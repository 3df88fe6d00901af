"""Public dungeon package interface."""

from .area import Area  # noqa: F401
from .config import ConfigError, DungeonConfig  # noqa: F401
from .connections import Basic, ConnectionStrategy, Secondary  # noqa: F401
from .connectivity import connected_components, flood_fill, is_connected  # noqa: F401
from .dungeon import Dungeon  # noqa: F401
from .pipeline import build_dungeon, generate_dungeon  # noqa: F401
from .rooms import (  # noqa: F401
    Chamber,
    Grow,
    GrowSeparated,
    Room,
    RoomGenerator,
    RoomPlacementError,
)
from .tiles import FLOOR, ROCK  # noqa: F401
from .tunnels import Tunneler  # noqa: F401
from .vectors import Vector2Int  # noqa: F401

__all__ = [
    "Area",
    "Basic",
    "Chamber",
    "ConfigError",
    "ConnectionStrategy",
    "Dungeon",
    "DungeonConfig",
    "FLOOR",
    "Grow",
    "GrowSeparated",
    "ROCK",
    "Room",
    "RoomGenerator",
    "RoomPlacementError",
    "Secondary",
    "Tunneler",
    "Vector2Int",
    "build_dungeon",
    "connected_components",
    "flood_fill",
    "generate_dungeon",
    "is_connected",
]
