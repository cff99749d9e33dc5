"""extpack CLI application with Typer."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from extpack import __version__
from extpack.app.build_pipeline import BuildResult
from extpack.bootstrap import bootstrap_application
from extpack.config import BuildConfig

app = typer.Typer(
    name="extpack",
    help="Package a web extension source tree into a deployable archive",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"extpack version {__version__}")
        raise typer.Exit()


def _report(result: BuildResult) -> None:
    for stage in result.stages:
        if stage.status == "completed":
            color = typer.colors.GREEN
        elif stage.status == "failed":
            color = typer.colors.RED
        else:
            color = typer.colors.YELLOW
        typer.secho(f"[{stage.status}] {stage.name}", fg=color)

    for note in result.notes:
        typer.secho(f"NOTE: {note}", fg=typer.colors.BLUE)


@app.command()
def build(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Build the extension archive for the project in the current directory."""

    config = BuildConfig.for_root(Path.cwd())
    container = bootstrap_application(config)

    result = asyncio.run(container.pipeline.run(progress=typer.echo))
    _report(result)

    if not result.ok:
        error = result.error
        reason = f"{type(error).__name__}: {error}" if error is not None else "unknown error"
        stage = result.failed_stage
        where = f" during {stage.name}" if stage is not None else ""
        typer.secho(f"Build failed{where}: {reason}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def run() -> None:
    """Console script entry point."""
    app()
