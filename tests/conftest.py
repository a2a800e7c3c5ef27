"""Shared test fixtures."""

from pathlib import Path

import pytest

from semnotes.storage import (
    NoteRepository,
    create_db_engine,
    create_session_factory,
    init_database,
)


@pytest.fixture
def tmp_notes(tmp_path: Path) -> Path:
    """Create a temporary notes directory with sample files."""
    notes = tmp_path / "notes"
    notes.mkdir()

    (notes / "a.md").write_text("hello", encoding="utf-8")
    (notes / "b.txt").write_text("world", encoding="utf-8")
    (notes / "c.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")

    return notes


@pytest.fixture
def repository(tmp_path: Path) -> NoteRepository:
    """Note store backed by a SQLite file outside the notes directory."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'semnotes.db'}")
    init_database(engine)
    yield NoteRepository(create_session_factory(engine))
    engine.dispose()
