import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

ROOM_GENERATORS = ("chamber", "grow", "grow_separated", "mixed")
TUNNELERS = ("l_shape", "weighted")
CONNECTIONS = ("basic", "secondary")

ENV_PREFIX = "BURROW_"


class ConfigError(ValueError):
    """Raised for generation settings that are malformed or out of range."""


@dataclass
class DungeonConfig:
    seed: Optional[int] = None
    row_count: int = 2
    area_count: int = 6
    area_spacing: int = 2
    room_generator: str = "grow"
    room_count: int = 5
    min_size: int = 4
    max_size: int = 8
    tunneler: str = "weighted"
    connection: str = "secondary"
    secondary_max_dist: Optional[int] = None
    max_placement_attempts: int = 1000
    enable_metrics: bool = True

    @property
    def effective_max_dist(self) -> int:
        if self.secondary_max_dist is not None:
            return self.secondary_max_dist
        return 3 * self.max_size

    def validate(self) -> "DungeonConfig":
        if self.room_generator not in ROOM_GENERATORS:
            raise ConfigError(f"unknown room_generator {self.room_generator!r}; expected one of {ROOM_GENERATORS}")
        if self.tunneler not in TUNNELERS:
            raise ConfigError(f"unknown tunneler {self.tunneler!r}; expected one of {TUNNELERS}")
        if self.connection not in CONNECTIONS:
            raise ConfigError(f"unknown connection {self.connection!r}; expected one of {CONNECTIONS}")
        if self.row_count < 1:
            raise ConfigError("row_count must be >= 1")
        if self.area_count < 1:
            raise ConfigError("area_count must be >= 1")
        if self.area_spacing < 1:
            raise ConfigError("area_spacing must be >= 1")
        if self.room_count < 0:
            raise ConfigError("room_count must be >= 0")
        if self.min_size < 1 or self.min_size > self.max_size:
            raise ConfigError("sizes must satisfy 1 <= min_size <= max_size")
        if self.max_placement_attempts < 1:
            raise ConfigError("max_placement_attempts must be >= 1")
        return self

    def check_ceilings(self, ceilings: Dict[str, int]) -> "DungeonConfig":
        """Reject fields above their ceiling; ``ceilings`` maps field name to the largest allowed value."""
        for name, ceiling in ceilings.items():
            value = getattr(self, name)
            if value is not None and value > ceiling:
                raise ConfigError(f"{name} must be <= {ceiling} (got {value})")
        return self

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_mapping(cls, data: Dict[str, Any], base: Optional["DungeonConfig"] = None) -> "DungeonConfig":
        """Build a config from string/typed values keyed by field name; unknown keys are ignored."""
        base = base or cls()
        updates = {}
        for f in fields(cls):
            if f.name in data and data[f.name] is not None:
                updates[f.name] = _coerce(f.name, data[f.name], getattr(base, f.name))
        return replace(base, **updates)

    @classmethod
    def from_env(cls, **overrides) -> "DungeonConfig":
        """Defaults < BURROW_* environment variables < explicit keyword overrides."""
        env = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key in os.environ:
                env[f.name] = os.environ[key]
        cfg = cls.from_mapping(env)
        if overrides:
            cfg = replace(cfg, **overrides)
        return cfg


_INT_FIELDS = {
    "seed",
    "row_count",
    "area_count",
    "area_spacing",
    "room_count",
    "min_size",
    "max_size",
    "secondary_max_dist",
    "max_placement_attempts",
}


def _coerce(name: str, value: Any, current: Any) -> Any:
    if not isinstance(value, str):
        return value
    v = value.strip()
    if name == "enable_metrics":
        return v.lower() not in {"0", "false", "no", ""}
    if name in _INT_FIELDS:
        if v == "" or v.lower() == "none":
            return None if name in ("seed", "secondary_max_dist") else current
        try:
            return int(v)
        except ValueError:
            raise ConfigError(f"{name} must be an integer (got {value!r})") from None
    return v.lower()


__all__ = ["ConfigError", "DungeonConfig", "ROOM_GENERATORS", "TUNNELERS", "CONNECTIONS"]
