"""Build a generated Dungeon from a DungeonConfig.

Maps the config's variant names onto room generators, tunnelers and
connection strategies, creates ``area_count`` areas and runs the dungeon's
generation phases.
"""
from __future__ import annotations

import random
from typing import Optional

from ..logging_utils import get_logger
from .area import Area
from .config import ConfigError, DungeonConfig
from .connections import Basic, ConnectionStrategy, Secondary
from .dungeon import Dungeon
from .rooms import Chamber, Grow, GrowSeparated, RoomGenerator
from .tunnels import Tunneler

log = get_logger("burrow.pipeline")

# Variants "mixed" picks from, per area
MIXED_GENERATORS = ("chamber", "grow", "grow_separated")


def make_room_generator(name: str, config: DungeonConfig) -> RoomGenerator:
    if name == "chamber":
        return Chamber(config.min_size, config.max_size)
    if name == "grow":
        return Grow(config.room_count, config.min_size, config.max_size, config.max_placement_attempts)
    if name == "grow_separated":
        return GrowSeparated(config.room_count, config.min_size, config.max_size, config.max_placement_attempts)
    raise ConfigError(f"unknown room generator {name!r}")


def make_tunneler(name: str) -> Tunneler:
    try:
        return Tunneler(name)
    except ValueError:
        raise ConfigError(f"unknown tunneler {name!r}") from None


def make_connection_strategy(name: str, config: DungeonConfig) -> ConnectionStrategy:
    if name == "basic":
        return Basic()
    if name == "secondary":
        return Secondary(config.effective_max_dist)
    raise ConfigError(f"unknown connection strategy {name!r}")


def build_area(config: DungeonConfig, rng: random.Random) -> Area:
    name = config.room_generator
    if name == "mixed":
        name = rng.choice(MIXED_GENERATORS)
    return Area(
        make_room_generator(name, config),
        make_tunneler(config.tunneler),
        make_connection_strategy(config.connection, config),
    )


def build_dungeon(config: DungeonConfig) -> Dungeon:
    """Dungeon populated with areas but not generated yet."""
    config.validate()
    dungeon = Dungeon(
        config.row_count,
        spacing=config.area_spacing,
        seed=config.seed,
        enable_metrics=config.enable_metrics,
    )
    # area recipes use their own stream, separate from generation
    recipe_rng = random.Random(dungeon.seed ^ 0x5EED)
    for _ in range(config.area_count):
        dungeon.add_area(build_area(config, recipe_rng))
    return dungeon


def generate_dungeon(config: Optional[DungeonConfig] = None) -> Dungeon:
    config = config or DungeonConfig()
    dungeon = build_dungeon(config)
    log.debug(event="generate_start", seed=dungeon.seed, **{k: v for k, v in config.as_dict().items() if k != "seed"})
    dungeon.generate()
    return dungeon


__all__ = [
    "build_area",
    "build_dungeon",
    "generate_dungeon",
    "make_room_generator",
    "make_tunneler",
    "make_connection_strategy",
]
