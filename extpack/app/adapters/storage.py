"""Filesystem-backed storage port implementation."""

from __future__ import annotations

import shutil
from pathlib import Path

from extpack.app.ports import StoragePort
from extpack.utils.paths import ensure_dir


class FileSystemStorageAdapter(StoragePort):
    """Adapter that performs direct filesystem operations."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps CRLF line endings as-is.
        with Path(path).open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        with Path(path).open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def copy_file(self, src: Path, dst: Path) -> None:
        source = Path(src)
        destination = Path(dst)
        destination.parent.mkdir(parents=True, exist_ok=True)
        if source.is_dir():
            shutil.copytree(source, destination, dirs_exist_ok=True)
            return
        destination.write_bytes(source.read_bytes())

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def ensure_dir(self, path: Path) -> Path:
        return ensure_dir(Path(path))

    def empty_dir(self, path: Path) -> None:
        root = Path(path)
        for child in sorted(root.iterdir()):
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()

    def remove_tree(self, path: Path) -> None:
        target = Path(path)
        if not target.exists():
            return
        shutil.rmtree(target)
