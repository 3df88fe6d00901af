"""
project: Burrow
module: __init__.py
License: MIT

Flask application factory.

Serves the dungeon generator over a small JSON/PNG API. Configuration is
sourced from environment variables (optionally loaded from a .env file) with
defaults suitable for development. A local `instance/` directory holds the
rotating log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from .dungeon import ConfigError, RoomPlacementError

__version__ = "0.2.0"

# Load .env if present so BURROW_* settings can be supplied without
# exporting shell variables during development.
load_dotenv()


def create_app(config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)

    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # read-only installs still serve requests; only file logging needs it
        logging.getLogger(__name__).warning("instance path %s not writable", app.instance_path)

    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        BURROW_CACHE_MAX=int(os.getenv("BURROW_CACHE_MAX", "8")),
        BURROW_MAX_SCALE=int(os.getenv("BURROW_MAX_SCALE", "16")),
        # request ceilings for generation size
        BURROW_MAX_AREAS=int(os.getenv("BURROW_MAX_AREAS", "64")),
        BURROW_MAX_ROWS=int(os.getenv("BURROW_MAX_ROWS", "16")),
        BURROW_MAX_SPACING=int(os.getenv("BURROW_MAX_SPACING", "16")),
        BURROW_MAX_ROOM_SIZE=int(os.getenv("BURROW_MAX_ROOM_SIZE", "32")),
        BURROW_MAX_ROOM_COUNT=int(os.getenv("BURROW_MAX_ROOM_COUNT", "32")),
        BURROW_MAX_ATTEMPTS=int(os.getenv("BURROW_MAX_ATTEMPTS", "5000")),
        BURROW_DISABLE_CACHE=os.getenv("BURROW_DISABLE_CACHE", "0") == "1",
    )
    if config_overrides:
        app.config.update(config_overrides)

    from .routes.dungeon_api import bp_dungeon
    from .routes.seed_api import bp_seed

    app.register_blueprint(bp_dungeon)
    app.register_blueprint(bp_seed)
    _register_error_handlers(app)
    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ConfigError)
    def bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(RoomPlacementError)
    def placement_failed(e):
        return jsonify({"error": str(e), "placed": e.placed, "requested": e.requested}), 422

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal server error", "error_id": error_id}), 500
