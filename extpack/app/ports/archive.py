"""Ports for compressing a staged workspace into a distributable archive."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Protocol

ArchiveState = Literal["idle", "writing", "closed", "errored"]


@dataclass(slots=True)
class ArchiveResult:
    """Durable archive produced by an :class:`ArchivePort`."""

    path: Path
    size_bytes: int
    entries: list[str] = field(default_factory=list)


class ArchivePort(Protocol):
    """Port interface for packaging a directory tree."""

    @property
    def state(self) -> ArchiveState:
        """Current lifecycle state of the archiver."""
        ...

    def archive(self, source_dir: Path, destination: Path) -> ArchiveResult:
        """Compress ``source_dir`` into ``destination`` and return the result.

        Entries are rooted at ``source_dir`` without an enclosing folder. The
        call returns only once the archive is flushed to disk.
        """
        ...
