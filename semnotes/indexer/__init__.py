"""Note indexing - walks the notes directory and syncs files into the store."""

from .filesystem import LocalFilesystem
from .notes import IndexFailure, IndexReport, NoteIndexer, has_valid_extension

__all__ = [
    "IndexFailure",
    "IndexReport",
    "LocalFilesystem",
    "NoteIndexer",
    "has_valid_extension",
]
