"""Application layer for extpack.

Build services sequence the packaging work; every filesystem side effect is
delegated to adapters via port interfaces.
"""

__all__ = [
    "ArtifactGenerator",
    "BuildPipeline",
    "BuildResult",
    "FileAssembler",
    "PipelineStage",
    "WorkspaceManager",
]

from extpack.app.artifacts import ArtifactGenerator
from extpack.app.assembler import FileAssembler
from extpack.app.build_pipeline import BuildPipeline, BuildResult, PipelineStage
from extpack.app.workspace import WorkspaceManager
