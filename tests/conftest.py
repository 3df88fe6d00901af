import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from burrow import create_app  # noqa: E402
from burrow.routes import dungeon_api  # noqa: E402


@pytest.fixture()
def test_app(tmp_path):
    app = create_app({"TESTING": True})
    app.instance_path = str(tmp_path)
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_dungeon_cache():
    with dungeon_api._dungeon_cache_lock:
        dungeon_api._dungeon_cache.clear()
    yield


@pytest.fixture(autouse=True)
def _isolate_burrow_env(monkeypatch):
    # Keep a developer's BURROW_* settings from leaking into generation tests
    for key in list(os.environ):
        if key.startswith("BURROW_") and key not in ("BURROW_LOG_LEVEL", "BURROW_LOG_JSON"):
            monkeypatch.delenv(key, raising=False)
