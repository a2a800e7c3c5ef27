"""Filesystem access used by the note indexer."""

from collections.abc import Iterator
from pathlib import Path

from semnotes.errors import DirectoryWalkError, NoteReadError


class LocalFilesystem:
    """Reads note files from the local disk."""

    encoding = "utf-8"

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """True for regular files, including symlinks that point at one."""
        return path.is_file()

    def walk(self, root: Path) -> Iterator[Path]:
        """Yield every entry below root, depth-first, sorted by name per directory.

        Symlinked directories are yielded but not descended into. Each call
        starts a fresh traversal. Uses an explicit stack, so tree depth is
        not limited by the interpreter's recursion limit.
        """
        stack = [self._list_dir(root)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            yield entry
            if entry.is_dir() and not entry.is_symlink():
                stack.append(self._list_dir(entry))

    def _list_dir(self, directory: Path) -> Iterator[Path]:
        try:
            return iter(sorted(directory.iterdir(), key=lambda p: p.name))
        except OSError as e:
            raise DirectoryWalkError(directory, str(e)) from e

    def read_text(self, path: Path) -> str:
        """Read a file exactly as stored; line endings are not translated."""
        try:
            return path.read_bytes().decode(self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise NoteReadError(path, str(e)) from e
