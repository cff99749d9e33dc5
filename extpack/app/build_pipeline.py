"""Extension build orchestration built on application ports."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from extpack.app.artifacts import ArtifactGenerator
from extpack.app.assembler import FileAssembler
from extpack.app.ports import (
    ArchivePort,
    ArchiveResult,
    ProgressCallback,
    StoragePort,
    null_progress,
)
from extpack.app.workspace import WorkspaceManager
from extpack.config import BuildConfig

logger = logging.getLogger(__name__)

StageStatus = Literal["pending", "completed", "skipped", "failed"]

STAGE_NAMES = ("workspace", "artifacts", "assemble", "archive", "export", "cleanup")


@dataclass(slots=True)
class PipelineStage:
    """Represents the status of a build phase."""

    name: str
    status: StageStatus = "pending"
    detail: str | None = None
    duration_seconds: float | None = None


@dataclass(slots=True)
class _BuildContext:
    archive: ArchiveResult | None = None
    sidecar_path: Path | None = None
    generated: list[Path] = field(default_factory=list)


class BuildResult(BaseModel):
    """Summary of one extension build."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    archive_path: Path | None = None
    archive_size: int | None = None
    archive_entries: list[str] = Field(default_factory=list)
    sidecar_path: Path | None = None
    stages: list[PipelineStage] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and all(stage.status == "completed" for stage in self.stages)

    @property
    def failed_stage(self) -> PipelineStage | None:
        for stage in self.stages:
            if stage.status == "failed":
                return stage
        return None


class BuildPipeline:
    """Orchestrate workspace → artifacts → assemble → archive → export → cleanup.

    Stages are awaited strictly in order and never overlap. Blocking filesystem
    work is pushed to a worker thread one call at a time. The first failing
    stage short-circuits the rest; the workspace is still removed afterwards
    unless ``BuildConfig.keep_workspace_on_failure`` is set.
    """

    def __init__(
        self,
        *,
        config: BuildConfig,
        storage_port: StoragePort,
        archive_port: ArchivePort,
        workspace: WorkspaceManager,
        artifacts: ArtifactGenerator,
        assembler: FileAssembler,
    ) -> None:
        self._config = config
        self._storage = storage_port
        self._archiver = archive_port
        self._workspace = workspace
        self._artifacts = artifacts
        self._assembler = assembler

    @asynccontextmanager
    async def _stage(
        self,
        stages: list[PipelineStage],
        name: str,
    ) -> AsyncIterator[PipelineStage]:
        """Context manager to standardize pipeline stage error handling."""

        stage = PipelineStage(name=name)
        stages.append(stage)
        start_time = time.monotonic()
        try:
            yield stage
        except Exception as exc:
            stage.status = "failed"
            stage.detail = f"{type(exc).__name__}: {exc}"
            raise
        else:
            if stage.status == "pending":
                stage.status = "completed"
        finally:
            stage.duration_seconds = time.monotonic() - start_time

    async def run(self, progress: ProgressCallback = null_progress) -> BuildResult:
        """Execute one full build and return its result.

        Never raises for stage failures: the exception is recorded on the
        failed stage and on ``BuildResult.error``.
        """

        stages: list[PipelineStage] = []
        notes: list[str] = []
        context = _BuildContext()
        error: Exception | None = None

        steps: list[tuple[str, Callable[[_BuildContext, ProgressCallback], Awaitable[None]]]] = [
            ("workspace", self._run_workspace),
            ("artifacts", self._run_artifacts),
            ("assemble", self._run_assemble),
            ("archive", self._run_archive),
            ("export", self._run_export),
        ]

        progress("Starting build process...")
        for name, step in steps:
            if error is not None:
                stages.append(PipelineStage(name=name, status="skipped"))
                continue
            try:
                async with self._stage(stages, name):
                    await step(context, progress)
            except Exception as exc:
                error = exc
                logger.error("Build stage %s failed: %s", name, exc)

        cleanup_error = await self._run_cleanup(stages, notes, failed=error is not None)
        if error is None:
            error = cleanup_error

        if context.generated and error is None:
            names = ", ".join(path.name for path in context.generated)
            notes.append(f"Generated {names}")
        if context.archive is not None and error is None:
            notes.append(f"Archive created at {context.archive.path}")
        if context.sidecar_path is not None and error is None:
            notes.append(f"Manifest exported to {context.sidecar_path}")
        if error is None:
            progress("Build completed successfully!")

        archive = context.archive if error is None else None
        return BuildResult(
            archive_path=archive.path if archive else None,
            archive_size=archive.size_bytes if archive else None,
            archive_entries=list(archive.entries) if archive else [],
            sidecar_path=context.sidecar_path if error is None else None,
            stages=stages,
            notes=notes,
            error=error,
        )

    # ------------------------------------------------------------------#
    # Stages
    # ------------------------------------------------------------------#

    async def _run_workspace(self, context: _BuildContext, progress: ProgressCallback) -> None:
        workspace = await asyncio.to_thread(self._workspace.prepare)
        logger.info("Workspace ready at %s", workspace)

    async def _run_artifacts(self, context: _BuildContext, progress: ProgressCallback) -> None:
        for write in (
            self._artifacts.write_entry_wrapper,
            self._artifacts.write_runtime_manifest,
            self._artifacts.write_application_entry,
        ):
            context.generated.append(await asyncio.to_thread(write, progress))
        logger.info("Generated %s", ", ".join(path.name for path in context.generated))

    async def _run_assemble(self, context: _BuildContext, progress: ProgressCallback) -> None:
        copied = await asyncio.to_thread(self._assembler.assemble, progress)
        logger.info("Assembled %d files into %s", len(copied), self._workspace.path)

    async def _run_archive(self, context: _BuildContext, progress: ProgressCallback) -> None:
        progress("Creating zip file...")
        context.archive = await asyncio.to_thread(
            self._archiver.archive,
            self._workspace.path,
            self._config.get_archive_path(),
        )
        progress(f"Zip file created ({context.archive.size_bytes} bytes)")

    async def _run_export(self, context: _BuildContext, progress: ProgressCallback) -> None:
        sidecar = self._config.get_sidecar_path()
        progress(f"Exporting manifest to {sidecar.name}...")
        await asyncio.to_thread(
            self._storage.copy_file,
            self._config.get_runtime_manifest_path(),
            sidecar,
        )
        context.sidecar_path = sidecar

    async def _run_cleanup(
        self,
        stages: list[PipelineStage],
        notes: list[str],
        *,
        failed: bool,
    ) -> Exception | None:
        if failed and self._config.keep_workspace_on_failure:
            stages.append(
                PipelineStage(name="cleanup", status="skipped", detail="workspace kept")
            )
            notes.append(f"Workspace kept for inspection at {self._workspace.path}")
            return None

        try:
            async with self._stage(stages, "cleanup"):
                await asyncio.to_thread(self._workspace.teardown)
        except Exception as exc:
            # After a stage failure, that earlier error stays the reported one.
            logger.warning("Workspace cleanup failed: %s", exc)
            return exc
        return None
