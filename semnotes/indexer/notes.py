"""Note indexer - syncs note files on disk into the note store."""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from semnotes.errors import ConfigurationError, IndexingInProgressError
from semnotes.storage import Note, NoteRepository

from .filesystem import LocalFilesystem

logger = logging.getLogger(__name__)

# Only these file types are indexed
NOTE_EXTENSIONS = (".md", ".txt")


def has_valid_extension(path: Path) -> bool:
    """Check if a file name ends in .md or .txt, ignoring case."""
    return path.name.lower().endswith(NOTE_EXTENSIONS)


@dataclass
class IndexFailure:
    """A file that could not be indexed."""

    path: str
    reason: str

    def to_dict(self) -> dict:
        return {"path": self.path, "reason": self.reason}


@dataclass
class IndexReport:
    """Outcome of one indexing run."""

    directory: str
    indexed: int = 0
    created: int = 0
    updated: int = 0
    failures: list[IndexFailure] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def to_dict(self) -> dict:
        return {
            "directory": self.directory,
            "indexed": self.indexed,
            "created": self.created,
            "updated": self.updated,
            "failed": self.failed,
            "failures": [f.to_dict() for f in self.failures],
        }


class NoteIndexer:
    """Indexes every .md and .txt file under a directory into the note store.

    Notes are reconciled by absolute file path: a path seen for the first
    time creates a note, a path seen again overwrites that note's content.
    Notes whose files disappear are left in place.
    """

    def __init__(
        self,
        notes_directory: Path,
        repository: NoteRepository,
        filesystem: LocalFilesystem | None = None,
    ) -> None:
        self.notes_directory = Path(notes_directory)
        self.repository = repository
        self.filesystem = filesystem or LocalFilesystem()
        self._run_lock = threading.Lock()

    def index_all_notes(self) -> int:
        """Index all notes and return how many were indexed successfully."""
        return self.index_notes().indexed

    def index_notes(self) -> IndexReport:
        """Index all notes and return a report of the run.

        Raises:
            ConfigurationError: the notes directory is missing or not a directory
            DirectoryWalkError: the directory could not be enumerated
            IndexingInProgressError: another run on this indexer has not finished
        """
        if not self._run_lock.acquire(blocking=False):
            raise IndexingInProgressError(
                f"Indexing of {self.notes_directory} is already running"
            )
        try:
            return self._run()
        finally:
            self._run_lock.release()

    def _run(self) -> IndexReport:
        root = self.notes_directory
        logger.info(f"Starting to index notes from directory: {root}")
        self._check_directory(root)

        report = IndexReport(directory=str(root))

        for path in self.filesystem.walk(root):
            if not self.filesystem.is_file(path) or not has_valid_extension(path):
                continue

            try:
                created = self._index_file(path)
            except Exception as e:
                logger.error(f"Failed to index note: {path}: {e}")
                report.failures.append(IndexFailure(path=str(path), reason=str(e)))
                continue

            report.indexed += 1
            if created:
                report.created += 1
            else:
                report.updated += 1

        logger.info(f"Successfully indexed {report.indexed} notes")
        if report.failures:
            logger.warning(f"{report.failed} notes could not be indexed")
        return report

    def _check_directory(self, root: Path) -> None:
        if not self.filesystem.exists(root):
            message = f"Notes directory does not exist: {root}"
            logger.error(message)
            raise ConfigurationError(message)
        if not self.filesystem.is_dir(root):
            message = f"Path is not a directory: {root}"
            logger.error(message)
            raise ConfigurationError(message)

    def _index_file(self, path: Path) -> bool:
        """Create or update the note for one file. Returns True if it was created."""
        logger.debug(f"Indexing note: {path}")

        content = self.filesystem.read_text(path)
        filepath = str(path.absolute())
        filename = path.name

        note = self.repository.find_by_filepath(filepath)
        if note is not None:
            # Only content changes; id, path, name and created_at stay as stored
            note.content = content
            self.repository.save(note)
            logger.debug(f"Updated existing note: {filename}")
            return False

        self.repository.save(Note(filepath=filepath, filename=filename, content=content))
        logger.debug(f"Created new note: {filename}")
        return True
