"""extpack - Build and package web extensions into deployable archives.

Stages an extension's source tree into a temporary workspace, synthesizes the
runtime wrapper files, and compresses everything into a single zip artifact.
"""

__version__ = "0.1.0"
__author__ = "extpack Contributors"

from extpack.config import BuildConfig, SourceEntry

__all__ = ["BuildConfig", "SourceEntry", "__version__"]
