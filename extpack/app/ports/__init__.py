"""Port interfaces for the extpack application layer.

Build services depend on these protocols, never on concrete implementations.
"""

__all__ = [
    "ArchivePort",
    "ArchiveResult",
    "ArchiveState",
    "ProgressCallback",
    "StoragePort",
    "null_progress",
]

from extpack.app.ports.archive import ArchivePort, ArchiveResult, ArchiveState
from extpack.app.ports.progress import ProgressCallback, null_progress
from extpack.app.ports.storage import StoragePort
