"""Pytest configuration and fixtures."""

import gc
import json
import shutil
import tempfile
import time
from collections.abc import Generator
from pathlib import Path

import pytest

from extpack.config import BuildConfig

SAMPLE_MANIFEST = {
    "title": "Auth0 AI Admin Assistant",
    "name": "auth0-ai-admin-assistant",
    "version": "1.0.0",
    "type": "application",
    "secrets": {"OPENAI_API_KEY": {"description": "API key", "required": True}},
}

SAMPLE_FRONTEND = (
    "<!DOCTYPE html>\n<html>\n<head><meta charset=\"utf-8\"><title>Admin Assistant</title></head>\n"
    "<body><h1>Administración ✓</h1></body>\n</html>\n"
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        # Force garbage collection to release any file handles
        gc.collect()
        # Small delay to allow OS to release file locks
        time.sleep(0.1)
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def source_tree(temp_dir: Path) -> Path:
    """Create an extension project with every required input except LICENSE."""
    root = temp_dir / "extension"
    root.mkdir()

    (root / "auth0-frontend.html").write_text(SAMPLE_FRONTEND, encoding="utf-8")
    (root / "auth0-manifest.json").write_text(json.dumps(SAMPLE_MANIFEST), encoding="utf-8")
    (root / "auth0-ai-admin.js").write_text(
        "const express = require('express');\nmodule.exports = express();\n",
        encoding="utf-8",
    )
    (root / "auth0-config.js").write_text("module.exports = { domain: 'x' };\n", encoding="utf-8")
    (root / "auth0-init.js").write_text(
        "const router = require('express').Router();\nmodule.exports = router;\n",
        encoding="utf-8",
    )
    (root / "package.json").write_text(
        json.dumps({"name": "auth0-ai-admin-assistant", "version": "1.0.0"}, indent=2),
        encoding="utf-8",
    )
    (root / "README.md").write_text("# Auth0 AI Admin Assistant\n", encoding="utf-8")
    return root


@pytest.fixture
def build_config(source_tree: Path) -> BuildConfig:
    """Build configuration rooted at the sample project."""
    return BuildConfig.for_root(source_tree)


@pytest.fixture
def sample_manifest() -> dict:
    """Manifest content written by ``source_tree``."""
    return json.loads(json.dumps(SAMPLE_MANIFEST))
