from pathlib import Path

import pytest
from pydantic import ValidationError

from extpack.config import DEFAULT_SOURCE_FILES, BuildConfig, SourceEntry


def test_derived_paths_are_rooted_at_project(tmp_path: Path) -> None:
    config = BuildConfig.for_root(tmp_path)
    root = tmp_path.resolve()

    assert config.root_dir == root
    assert config.get_dist_dir() == root / "dist"
    assert config.get_workspace_dir() == root / "dist" / "temp"
    assert config.get_archive_path() == root / "dist" / "auth0-ai-admin-assistant.zip"
    assert config.get_sidecar_path() == root / "dist" / "extension.json"
    assert config.get_runtime_manifest_path() == root / "dist" / "temp" / "webtask.json"
    assert config.get_manifest_source() == root / "auth0-manifest.json"


def test_config_is_immutable(tmp_path: Path) -> None:
    config = BuildConfig.for_root(tmp_path)

    with pytest.raises(ValidationError):
        config.archive_name = "other.zip"  # type: ignore[misc]


def test_compression_level_bounds(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        BuildConfig.for_root(tmp_path, compression_level=10)


def test_default_source_files_rename_config_module() -> None:
    renamed = {entry.source: entry.destination for entry in DEFAULT_SOURCE_FILES if entry.renamed}
    assert renamed == {"auth0-config.js": "config.js"}
    assert not SourceEntry(source="README.md", destination="README.md").renamed
