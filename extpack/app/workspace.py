"""Ephemeral build workspace management."""

from __future__ import annotations

import logging
from pathlib import Path

from extpack.app.ports import StoragePort
from extpack.config import BuildConfig

logger = logging.getLogger(__name__)


class WorkspaceManager:
    """Own the output directory and the staging workspace nested inside it."""

    def __init__(self, *, config: BuildConfig, storage_port: StoragePort) -> None:
        self._config = config
        self._storage = storage_port

    @property
    def path(self) -> Path:
        return self._config.get_workspace_dir()

    def prepare(self) -> Path:
        """Give the build a clean slate and return the workspace path.

        Prior contents of the output directory (archives, sidecars, stale
        workspaces) are removed, so repeated builds never collide.
        """
        dist_dir = self._storage.ensure_dir(self._config.get_dist_dir())
        self._storage.empty_dir(dist_dir)
        workspace = self._storage.ensure_dir(self.path)
        logger.debug("Prepared workspace %s", workspace)
        return workspace

    def exists(self) -> bool:
        return self._storage.exists(self.path)

    def teardown(self) -> None:
        """Remove the workspace; a no-op when it is already gone."""
        self._storage.remove_tree(self.path)
        logger.debug("Removed workspace %s", self.path)
