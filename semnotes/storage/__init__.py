"""Persistent storage for indexed notes."""

from .database import create_db_engine, create_session_factory, init_database
from .models import Base, Note
from .notes import NoteRepository

__all__ = [
    "Base",
    "Note",
    "NoteRepository",
    "create_db_engine",
    "create_session_factory",
    "init_database",
]
