"""Copy extension sources into the build workspace."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from extpack.app.artifacts import render_default_license
from extpack.app.ports import ProgressCallback, StoragePort, null_progress
from extpack.config import BuildConfig

logger = logging.getLogger(__name__)


def _current_year() -> int:
    return datetime.now().year


class FileAssembler:
    """Populate the workspace with the extension's source files.

    Copies run one at a time and stop at the first error. Every copy is
    announced before it starts so the last progress line names the file
    that failed.
    """

    def __init__(
        self,
        *,
        config: BuildConfig,
        storage_port: StoragePort,
        year_provider: Callable[[], int] = _current_year,
    ) -> None:
        self._config = config
        self._storage = storage_port
        self._year_provider = year_provider

    def assemble(self, progress: ProgressCallback = null_progress) -> list[Path]:
        """Copy every workspace input and return the written paths in order."""
        progress("Copying files to temp directory...")
        written = [self.write_public_index(progress)]
        for entry in self._config.source_files:
            written.append(self.copy_source(entry.source, entry.destination, progress))
        written.append(self.write_license(progress))
        return written

    def write_public_index(self, progress: ProgressCallback = null_progress) -> Path:
        """Render the HTML template as the public index page."""
        config = self._config
        public_dir = self._storage.ensure_dir(
            config.get_workspace_dir() / config.public_dirname
        )
        template = config.get_frontend_template()
        target = public_dir / config.public_index_name
        progress(f"Writing {template.name} -> {config.public_dirname}/{target.name}")
        content = self._storage.read_text(template)
        self._storage.write_text(target, content)
        return target

    def copy_source(
        self,
        source: str,
        destination: str,
        progress: ProgressCallback = null_progress,
    ) -> Path:
        """Copy ``source`` from the project root to ``destination`` in the workspace."""
        src = self._config.root_dir / source
        dst = self._config.get_workspace_dir() / destination
        progress(f"Copying {source} -> {destination}")
        if not self._storage.exists(src):
            raise FileNotFoundError(f"Required source file not found: {src}")
        self._storage.copy_file(src, dst)
        return dst

    def write_license(self, progress: ProgressCallback = null_progress) -> Path:
        """Copy the project license, or synthesize an MIT license if absent."""
        config = self._config
        source = config.get_license_source()
        target = config.get_workspace_dir() / config.license_name

        if self._storage.exists(source):
            progress(f"Copying {config.license_name}")
            self._storage.copy_file(source, target)
            return target

        year = self._year_provider()
        progress(f"No {config.license_name} found; creating default MIT license ({year})")
        logger.info("Synthesizing default license for %s", config.root_dir)
        self._storage.write_text(
            target, render_default_license(year, holder=config.license_holder)
        )
        return target
