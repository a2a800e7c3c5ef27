"""Error types raised by semnotes."""

from pathlib import Path


class SemnotesError(Exception):
    """Base class for all semnotes errors."""


class ConfigurationError(SemnotesError):
    """The configured notes directory is missing or is not a directory."""


class NoteReadError(SemnotesError):
    """A single note file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryWalkError(SemnotesError):
    """Enumerating the notes directory failed partway through."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to walk {path}: {reason}")
        self.path = path
        self.reason = reason


class IndexingInProgressError(SemnotesError):
    """An indexing run is already in progress on this indexer."""


class ClientActivationError(SemnotesError):
    """The OpenAI client could not be created, or was used before activation."""


class ModelProviderError(SemnotesError):
    """A call to the model provider failed."""
