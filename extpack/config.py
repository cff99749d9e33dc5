"""Build configuration with Pydantic.

All fixed locations used by a build are resolved from a single project root
and carried on an immutable ``BuildConfig`` passed explicitly to each component.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SourceEntry(BaseModel):
    """Source file or directory copied into the workspace, optionally renamed."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="File or directory relative to the project root")
    destination: str = Field(..., description="Path relative to the workspace root")

    @property
    def renamed(self) -> bool:
        return self.source != self.destination


DEFAULT_SOURCE_FILES: tuple[SourceEntry, ...] = (
    SourceEntry(source="auth0-ai-admin.js", destination="auth0-ai-admin.js"),
    SourceEntry(source="auth0-config.js", destination="config.js"),
    SourceEntry(source="auth0-init.js", destination="auth0-init.js"),
    SourceEntry(source="package.json", destination="package.json"),
    SourceEntry(source="README.md", destination="README.md"),
)


class BuildConfig(BaseModel):
    """extpack build configuration.

    Built once at process start; there are no environment or file overrides.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(..., description="Project root holding the extension sources")

    # Output layout
    dist_dirname: str = Field(default="dist", description="Output directory under the root")
    workspace_dirname: str = Field(
        default="temp",
        description="Ephemeral staging directory nested inside the output directory",
    )
    archive_name: str = Field(
        default="auth0-ai-admin-assistant.zip",
        description="File name of the packaged archive",
    )
    sidecar_name: str = Field(
        default="extension.json",
        description="File name of the manifest copy published next to the archive",
    )

    # Inputs
    manifest_source: str = Field(
        default="auth0-manifest.json",
        description="Extension manifest (JSON object) relative to the root",
    )
    frontend_template: str = Field(
        default="auth0-frontend.html",
        description="HTML template rendered as the public index page",
    )
    license_name: str = Field(default="LICENSE", description="License file name")
    source_files: tuple[SourceEntry, ...] = Field(
        default=DEFAULT_SOURCE_FILES,
        description="Files and directories copied verbatim into the workspace, in copy order",
    )

    # Generated artifacts
    extension_title: str = Field(
        default="Auth0 AI Admin Assistant Extension",
        description="Title written in the header of the composed entry file",
    )
    entry_wrapper_name: str = Field(
        default="webtask.js",
        description="Entry-point file name expected by the host runtime",
    )
    runtime_manifest_name: str = Field(
        default="webtask.json",
        description="Runtime manifest file name expected by the host runtime",
    )
    application_entry_name: str = Field(
        default="index.js",
        description="Composed application entry file re-exported by the wrapper",
    )
    app_module: str = Field(default="auth0-ai-admin", description="Core application module")
    init_module: str = Field(default="auth0-init", description="Initialization routes module")
    mount_path: str = Field(default="/", description="Path the init routes are mounted at")
    public_dirname: str = Field(default="public", description="Public asset directory")
    public_index_name: str = Field(default="index.html", description="Public index page")
    license_holder: str = Field(
        default="Your Name",
        description="Copyright holder named in a synthesized license",
    )

    # Archive
    compression_level: int = Field(
        default=9,
        ge=0,
        le=9,
        description="Deflate compression level (9 = maximum)",
    )

    # Failure handling
    keep_workspace_on_failure: bool = Field(
        default=False,
        description="Leave the workspace in place after a failed build for inspection",
    )

    @classmethod
    def for_root(cls, root_dir: Path, **overrides: object) -> "BuildConfig":
        """Create a configuration anchored at ``root_dir``."""
        return cls(root_dir=Path(root_dir).resolve(), **overrides)

    def get_dist_dir(self) -> Path:
        """Get the output directory."""
        return self.root_dir / self.dist_dirname

    def get_workspace_dir(self) -> Path:
        """Get the ephemeral staging directory."""
        return self.get_dist_dir() / self.workspace_dirname

    def get_archive_path(self) -> Path:
        """Get the path of the packaged archive."""
        return self.get_dist_dir() / self.archive_name

    def get_sidecar_path(self) -> Path:
        """Get the path of the exported manifest copy."""
        return self.get_dist_dir() / self.sidecar_name

    def get_manifest_source(self) -> Path:
        return self.root_dir / self.manifest_source

    def get_frontend_template(self) -> Path:
        return self.root_dir / self.frontend_template

    def get_license_source(self) -> Path:
        return self.root_dir / self.license_name

    def get_runtime_manifest_path(self) -> Path:
        """Get the runtime manifest location inside the workspace."""
        return self.get_workspace_dir() / self.runtime_manifest_name
