"""Event logging for the generator, the API and the CLI.

Every record is one line: ``level=<lvl> ts=<epoch> <field>=<value> ...``,
or a compact JSON object when ``BURROW_LOG_JSON`` is set. Records carry an
``event`` name plus whatever counters describe it (seed, tile count, phase
timings), so a run can be followed with grep or fed to a log shipper.

    from burrow.logging_utils import get_logger
    log = get_logger("burrow.dungeon")
    log.info(event="dungeon_generated", seed=42, tiles=812)

``None`` fields are left out. Spaces in text values become underscores in
key=value output. Errors go to stderr, everything else to stdout.

Environment (read on every record, so tests and the CLI can flip them):
    BURROW_LOG_LEVEL  debug|info|warn|error (default: info)
    BURROW_LOG_JSON   1/true/yes/on for JSON lines
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
DEFAULT_LEVEL = "info"


def _threshold() -> int:
    name = os.getenv("BURROW_LOG_LEVEL", DEFAULT_LEVEL).lower()
    return LEVELS.get(name, LEVELS[DEFAULT_LEVEL])


def _json_enabled() -> bool:
    return os.getenv("BURROW_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _kv_value(value) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def render(level: str, fields: dict) -> str:
    """One log line for ``fields`` at ``level``."""
    ts = int(time.time())
    present = {k: v for k, v in fields.items() if v is not None}
    if _json_enabled():
        return json.dumps({**present, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    head = [f"level={level}", f"ts={ts}"]
    return " ".join(head + [f"{k}={_kv_value(v)}" for k, v in present.items()])


class EventLogger:
    def __init__(self, name: str = "burrow"):
        self.name = name

    def emit(self, level: str, **fields) -> None:
        if LEVELS[level] < _threshold():
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(render(level, fields), file=stream)

    def debug(self, **fields):
        self.emit("debug", **fields)

    def info(self, **fields):
        self.emit("info", **fields)

    def warn(self, **fields):
        self.emit("warn", **fields)

    def error(self, **fields):
        self.emit("error", **fields)


_loggers: dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    """Shared logger for ``name``; repeated calls return the same instance."""
    logger = _loggers.get(name)
    if logger is None:
        logger = _loggers[name] = EventLogger(name)
    return logger


log = get_logger("burrow")
