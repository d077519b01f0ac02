"""Application extensions.

Kept apart from the app factory so models and services can import the
database instance without circular imports.
"""
from flask_sqlalchemy import SQLAlchemy

# SQLAlchemy database instance backing the per-browser storage slots.
db = SQLAlchemy()
