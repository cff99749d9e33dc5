"""Zip archive adapter for staged extension workspaces."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

from extpack.app.ports import ArchivePort, ArchiveResult, ArchiveState
from extpack.utils.paths import archive_name, find_files

logger = logging.getLogger(__name__)


class ZipArchiver(ArchivePort):
    """Create deflate-compressed zip archives from workspace directories.

    Lifecycle: ``idle -> writing -> closed | errored``. ``closed`` is only
    reached once the central directory is written and the file is fsynced.
    """

    def __init__(self, compression_level: int = 9) -> None:
        self._compression_level = compression_level
        self._state: ArchiveState = "idle"

    @property
    def state(self) -> ArchiveState:
        return self._state

    def archive(self, source_dir: Path, destination: Path) -> ArchiveResult:
        if not source_dir.exists():
            raise FileNotFoundError(f"Archive source directory not found: {source_dir}")
        if not source_dir.is_dir():
            raise ValueError(f"Archive source must be a directory: {source_dir}")
        if self._state == "writing":
            raise RuntimeError("Archiver is already writing an archive")

        destination.parent.mkdir(parents=True, exist_ok=True)
        self._state = "writing"
        entries: list[str] = []

        try:
            with destination.open("wb") as handle:
                with ZipFile(
                    handle,
                    "w",
                    compression=ZIP_DEFLATED,
                    compresslevel=self._compression_level,
                ) as archive:
                    for path in find_files(source_dir):
                        name = archive_name(path, source_dir)
                        archive.write(path, arcname=name)
                        entries.append(name)
                handle.flush()
                os.fsync(handle.fileno())
        except Exception:
            self._state = "errored"
            destination.unlink(missing_ok=True)
            raise

        self._state = "closed"
        size_bytes = destination.stat().st_size
        logger.debug("Archive %s closed with %d entries", destination, len(entries))
        return ArchiveResult(path=destination, size_bytes=size_bytes, entries=entries)
