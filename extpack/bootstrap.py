"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

from dataclasses import dataclass

from extpack.app import ArtifactGenerator, BuildPipeline, FileAssembler, WorkspaceManager
from extpack.app.adapters import FileSystemStorageAdapter, ZipArchiver
from extpack.app.ports import ArchivePort, StoragePort
from extpack.config import BuildConfig


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    config: BuildConfig
    pipeline: BuildPipeline
    workspace: WorkspaceManager
    artifacts: ArtifactGenerator
    assembler: FileAssembler
    storage_port: StoragePort
    archive_port: ArchivePort


def bootstrap_application(
    config: BuildConfig,
    *,
    storage_port: StoragePort | None = None,
    archive_port: ArchivePort | None = None,
) -> ApplicationContainer:
    """Instantiate adapters and services for one build configuration."""

    storage = storage_port or FileSystemStorageAdapter()
    archiver = archive_port or ZipArchiver(compression_level=config.compression_level)

    workspace = WorkspaceManager(config=config, storage_port=storage)
    artifacts = ArtifactGenerator(config=config, storage_port=storage)
    assembler = FileAssembler(config=config, storage_port=storage)

    pipeline = BuildPipeline(
        config=config,
        storage_port=storage,
        archive_port=archiver,
        workspace=workspace,
        artifacts=artifacts,
        assembler=assembler,
    )

    return ApplicationContainer(
        config=config,
        pipeline=pipeline,
        workspace=workspace,
        artifacts=artifacts,
        assembler=assembler,
        storage_port=storage,
        archive_port=archiver,
    )
