"""Tests for the zip archive adapter."""

from __future__ import annotations

from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

import pytest

import extpack.app.adapters.archive as archive_module
from extpack.app.adapters import ZipArchiver


@pytest.fixture
def staged(temp_dir: Path) -> Path:
    workspace = temp_dir / "dist" / "temp"
    (workspace / "public").mkdir(parents=True)
    (workspace / "webtask.js").write_text("module.exports = require('./index');")
    (workspace / "public" / "index.html").write_text("<html></html>" * 100)
    return workspace


def test_archive_entries_rooted_at_workspace(staged: Path, temp_dir: Path) -> None:
    archiver = ZipArchiver()
    destination = temp_dir / "dist" / "bundle.zip"

    result = archiver.archive(staged, destination)

    assert result.path == destination
    assert result.entries == ["public/index.html", "webtask.js"]
    assert result.size_bytes == destination.stat().st_size > 0
    with ZipFile(destination) as archive:
        assert sorted(archive.namelist()) == ["public/index.html", "webtask.js"]
        assert all(info.compress_type == ZIP_DEFLATED for info in archive.infolist())
        assert archive.read("public/index.html") == b"<html></html>" * 100


def test_state_transitions_to_closed(staged: Path, temp_dir: Path) -> None:
    archiver = ZipArchiver(compression_level=9)
    assert archiver.state == "idle"

    archiver.archive(staged, temp_dir / "out.zip")

    assert archiver.state == "closed"


def test_failure_sets_errored_and_removes_partial_file(
    staged: Path, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    missing = staged / "vanished.js"
    monkeypatch.setattr(archive_module, "find_files", lambda root: [missing])
    archiver = ZipArchiver()
    destination = temp_dir / "broken.zip"

    with pytest.raises(FileNotFoundError):
        archiver.archive(staged, destination)

    assert archiver.state == "errored"
    assert not destination.exists()


def test_missing_source_directory(temp_dir: Path) -> None:
    archiver = ZipArchiver()

    with pytest.raises(FileNotFoundError, match="Archive source directory not found"):
        archiver.archive(temp_dir / "nope", temp_dir / "out.zip")

    assert archiver.state == "idle"


def test_source_must_be_directory(temp_dir: Path) -> None:
    not_a_dir = temp_dir / "file.txt"
    not_a_dir.write_text("x")

    with pytest.raises(ValueError, match="must be a directory"):
        ZipArchiver().archive(not_a_dir, temp_dir / "out.zip")
