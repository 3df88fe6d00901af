"""
project: Burrow
module: server.py
License: MIT

Server bootstrap: logging setup and the Flask development server.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask

from burrow import create_app

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Create the app, configure logging and serve until interrupted."""
    app = create_app()
    _configure_logging(app)
    logging.getLogger(__name__).info("Starting dungeon API on %s:%s", host, port)
    app.run(host=host, port=port, debug=debug)


def _configure_logging(app: Flask):
    """Configure logging to both console and a rotating file in instance/.

    The file path will be instance/app.log. Retains a few backups to avoid growth.
    Safe to call repeatedly: handlers installed by a previous call are replaced.
    """
    log_dir = app.instance_path
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "app.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for h in list(root.handlers):
        if getattr(h, "_burrow", False):
            root.removeHandler(h)
            h.close()

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler._burrow = True

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    console._burrow = True

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
