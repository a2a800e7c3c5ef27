"""Note store backed by SQLAlchemy."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from .models import Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """Looks up and persists notes by their file path.

    Every call runs in its own short-lived session; returned notes are
    detached and can be modified and passed back to save().
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_by_filepath(self, filepath: str) -> Note | None:
        """Return the note stored for this exact path, if any."""
        with self._session_factory() as session:
            return session.scalars(select(Note).where(Note.filepath == filepath)).first()

    def get(self, note_id: int) -> Note | None:
        with self._session_factory() as session:
            return session.get(Note, note_id)

    def list_all(self) -> list[Note]:
        """All notes ordered by path."""
        with self._session_factory() as session:
            return list(session.scalars(select(Note).order_by(Note.filepath)))

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(Note)) or 0

    def save(self, note: Note) -> Note:
        """Insert a new note or write the changed columns of an existing one.

        The store assigns id and timestamps. Saving a note whose columns
        are unchanged issues no UPDATE, so updated_at is left alone.
        """
        with self._session_factory() as session, session.begin():
            if note.id is None:
                session.add(note)
                persisted = note
            else:
                persisted = session.merge(note)
            session.flush()
        return persisted
