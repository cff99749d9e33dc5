"""Storage port interface for filesystem operations."""

from pathlib import Path
from typing import Protocol


class StoragePort(Protocol):
    """Port interface for storage operations.

    Abstracts filesystem I/O to enable testing and alternative backends.

    Side effects: Reads/writes files and directories (local only).
    """

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text file without newline translation.

        Args:
            path: File path

        Returns:
            File contents as string
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write UTF-8 text file without newline translation.

        The parent directory must already exist.

        Args:
            path: File path
            content: Content to write
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file, or a directory recursively, with bytes unchanged.

        Args:
            src: Source path
            dst: Destination path
        """
        ...

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists."""
        ...

    def ensure_dir(self, path: Path) -> Path:
        """Create ``path`` (and parents) if missing and return it."""
        ...

    def empty_dir(self, path: Path) -> None:
        """Remove every entry inside ``path``, keeping the directory itself."""
        ...

    def remove_tree(self, path: Path) -> None:
        """Recursively delete ``path``; no error if it is already gone."""
        ...
