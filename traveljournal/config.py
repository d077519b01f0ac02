"""Configuration helpers for the Travel Journal application."""
from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Dict


MIB = 1024 * 1024

DEFAULTS = {
    "SECRET_KEY": "dev-secret-change-me",
    "SQLALCHEMY_TRACK_MODIFICATIONS": False,
    "SQLALCHEMY_ENGINE_OPTIONS": {
        "pool_pre_ping": True,
        "pool_recycle": 300,
    },
    "DATABASE_URL": "sqlite:///journal.db",
    "STORAGE_KEY": "travelEntries",
    "MAX_IMAGE_BYTES": 5 * MIB,
    "IMAGE_MAX_SIDE": 0,
    # Leaves room above MAX_IMAGE_BYTES so oversize photos reach validation.
    "MAX_CONTENT_LENGTH": 16 * MIB,
    "DEFAULT_LANG": "ko",
    "LOG_LEVEL": "INFO",
    "SESSION_DAYS": 365,
}


def _normalize_database_url(url: str) -> str:
    """Normalise DATABASE_URL for SQLAlchemy."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def _env_int(name: str) -> int:
    raw = os.environ.get(name)
    if raw in (None, ""):
        return DEFAULTS[name]
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config() -> Dict[str, Any]:
    """Collect runtime configuration from the environment."""
    secret_key = os.environ.get("SECRET_KEY", DEFAULTS["SECRET_KEY"])
    raw_db_url = os.environ.get("DATABASE_URL", DEFAULTS["DATABASE_URL"])
    database_url = _normalize_database_url(raw_db_url)

    config = {
        "SECRET_KEY": secret_key,
        "SQLALCHEMY_DATABASE_URI": database_url,
        "SQLALCHEMY_TRACK_MODIFICATIONS": DEFAULTS["SQLALCHEMY_TRACK_MODIFICATIONS"],
        "SQLALCHEMY_ENGINE_OPTIONS": DEFAULTS["SQLALCHEMY_ENGINE_OPTIONS"].copy(),
        "STORAGE_KEY": os.environ.get("STORAGE_KEY", DEFAULTS["STORAGE_KEY"]),
        "MAX_IMAGE_BYTES": _env_int("MAX_IMAGE_BYTES"),
        "IMAGE_MAX_SIDE": _env_int("IMAGE_MAX_SIDE"),
        "MAX_CONTENT_LENGTH": _env_int("MAX_CONTENT_LENGTH"),
        "DEFAULT_LANG": os.environ.get("DEFAULT_LANG", DEFAULTS["DEFAULT_LANG"]),
        "LOG_LEVEL": os.environ.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]).upper(),
        "PERMANENT_SESSION_LIFETIME": timedelta(days=_env_int("SESSION_DAYS")),
    }
    return config
