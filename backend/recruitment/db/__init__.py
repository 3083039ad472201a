"""Database package."""

from recruitment.db.base import Base
from recruitment.db.partial_update import apply_partial_update, build_partial_update
from recruitment.db.session import SessionLocal, create_db_engine, engine, get_db

__all__ = [
    "Base",
    "SessionLocal",
    "apply_partial_update",
    "build_partial_update",
    "create_db_engine",
    "engine",
    "get_db",
]
