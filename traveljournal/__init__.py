"""Application factory for the Travel Journal."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from flask import Flask

from .config import load_config
from .extensions import db
from .routes import register as register_routes
from .services.entries import setup_database

PACKAGE_DIR = Path(__file__).resolve().parent


def create_app(config_override: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(
        __name__,
        static_folder=str(PACKAGE_DIR / "static"),
        template_folder=str(PACKAGE_DIR / "templates"),
    )
    app.config.update(load_config())
    if config_override:
        app.config.update(config_override)

    _configure_logging(app)

    db.init_app(app)
    setup_database(app)
    register_routes(app)
    return app


def _configure_logging(app: Flask) -> None:
    """Route package loggers through ``app.logger`` at the configured level."""

    level = logging.getLevelName(app.config.get("LOG_LEVEL", "INFO"))
    if not isinstance(level, int):
        level = logging.INFO
    # app.logger is the "traveljournal" logger; module loggers propagate to it.
    app.logger.setLevel(level)


__all__ = ["create_app", "db"]
