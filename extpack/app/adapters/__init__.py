"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .archive import ZipArchiver
from .storage import FileSystemStorageAdapter

__all__ = [
    "FileSystemStorageAdapter",
    "ZipArchiver",
]
