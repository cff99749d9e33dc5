"""Progress reporting contract shared by build services."""

from collections.abc import Callable

ProgressCallback = Callable[[str], None]


def null_progress(message: str) -> None:
    """Discard progress messages."""
    return None
