"""Synthesized workspace files.

The ``render_*`` functions are pure: they build file content from their
arguments and never touch the filesystem. :class:`ArtifactGenerator` performs
the writes, one file per call.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from extpack.app.ports import ProgressCallback, StoragePort, null_progress
from extpack.config import BuildConfig
from extpack.manifest import ExtensionManifest, parse_manifest

logger = logging.getLogger(__name__)

MIT_LICENSE_TEMPLATE = """MIT License

Copyright (c) {year} {holder}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE."""


def _js_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _relative_require(module: str) -> str:
    # Strip the extension so "index.js" and "index" resolve the same way.
    stem = PurePosixPath(module)
    if stem.suffix == ".js":
        stem = stem.with_suffix("")
    return _js_string(f"./{stem.as_posix()}")


def render_entry_wrapper(entry_module: str) -> str:
    """Return a module that re-exports ``entry_module`` unchanged."""
    return f"module.exports = require({_relative_require(entry_module)});"


def render_application_entry(
    title: str,
    app_module: str,
    init_module: str,
    mount_path: str = "/",
) -> str:
    """Return the composed application entry.

    The core application object is loaded from ``app_module`` and the
    initialization routes from ``init_module`` are attached at ``mount_path``.
    """
    lines = [
        f"// {title}",
        f"const app = require({_relative_require(app_module)});",
        f"const initRoutes = require({_relative_require(init_module)});",
        "",
        "// Mount initialization routes",
        f"app.use({_js_string(mount_path)}, initRoutes);",
        "",
        "// Export for the host runtime",
        "module.exports = app;",
    ]
    return "\n".join(lines)


def render_manifest(manifest: ExtensionManifest) -> str:
    """Return the runtime manifest as pretty-printed JSON."""
    return manifest.render()


def render_default_license(year: int, holder: str = "Your Name") -> str:
    """Return MIT license text for ``year`` and ``holder``."""
    return MIT_LICENSE_TEMPLATE.format(year=year, holder=holder)


class ArtifactGenerator:
    """Write the synthesized wrapper files into an existing workspace."""

    def __init__(self, *, config: BuildConfig, storage_port: StoragePort) -> None:
        self._config = config
        self._storage = storage_port

    def _target(self, name: str) -> Path:
        workspace = self._config.get_workspace_dir()
        if not self._storage.exists(workspace):
            raise FileNotFoundError(f"Workspace directory not found: {workspace}")
        return workspace / name

    def load_manifest(self) -> ExtensionManifest:
        """Read and validate the extension manifest from the project root."""
        source = self._config.get_manifest_source()
        text = self._storage.read_text(source)
        return parse_manifest(text, source=str(source))

    def write_entry_wrapper(self, progress: ProgressCallback = null_progress) -> Path:
        name = self._config.entry_wrapper_name
        progress(f"Creating {name} file...")
        target = self._target(name)
        self._storage.write_text(
            target, render_entry_wrapper(self._config.application_entry_name)
        )
        return target

    def write_runtime_manifest(self, progress: ProgressCallback = null_progress) -> Path:
        name = self._config.runtime_manifest_name
        progress(f"Creating {name} file...")
        target = self._target(name)
        manifest = self.load_manifest()
        self._storage.write_text(target, render_manifest(manifest))
        logger.debug("Runtime manifest keys: %s", sorted(manifest.data))
        return target

    def write_application_entry(self, progress: ProgressCallback = null_progress) -> Path:
        config = self._config
        name = config.application_entry_name
        progress(f"Creating {name} file...")
        target = self._target(name)
        self._storage.write_text(
            target,
            render_application_entry(
                config.extension_title,
                config.app_module,
                config.init_module,
                config.mount_path,
            ),
        )
        return target
