"""Path utilities for directory and file operations."""

from __future__ import annotations

from pathlib import Path, PurePosixPath


def ensure_dir(path: Path) -> Path:
    """Ensure directory exists, creating if necessary."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def find_files(root: Path, follow_symlinks: bool = False) -> list[Path]:
    """Recursively list regular files under ``root`` in sorted order."""
    if not root.is_dir():
        return []

    files = []
    for path in root.rglob("*"):
        if path.is_symlink() and not follow_symlinks:
            continue

        if path.is_file():
            files.append(path)

    return sorted(files)


def archive_name(path: Path, base: Path) -> str:
    """Return ``path`` relative to ``base`` as a POSIX archive entry name."""
    return PurePosixPath(*path.relative_to(base).parts).as_posix()
