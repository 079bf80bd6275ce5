"""
typst-project CLI - Manifest commands.

Find, validate and display the typst.toml of the project containing a path.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from typst_project.cli.errors import (
    ExitCode,
    print_deserialize_error,
    print_error,
    print_io_error,
)
from typst_project.core.heuristics import MANIFEST_FILE
from typst_project.core.manifest import DeserializeError, Manifest

app = typer.Typer(
    name="manifest",
    help="Inspect the typst.toml manifest of a project",
    no_args_is_help=True,
)

console = Console()


def _find_manifest(path: Path) -> Manifest:
    try:
        manifest = Manifest.try_find(path)
    except OSError as e:
        print_io_error(e)
        raise typer.Exit(ExitCode.IO_ERROR) from e
    except DeserializeError as e:
        print_deserialize_error(e)
        raise typer.Exit(ExitCode.NOT_FOUND) from e

    if manifest is None:
        print_error(
            f"No {MANIFEST_FILE} found from {path}",
            solution="Run this inside a package, or pass its directory",
        )
        raise typer.Exit(ExitCode.NOT_FOUND)

    return manifest


def _join(values: Iterable[object]) -> str:
    joined = ", ".join(sorted(str(v) for v in values))
    return joined or "-"


@app.command()
def show(
    path: Annotated[
        Path,
        typer.Argument(help="Path inside the project"),
    ] = Path("."),
) -> None:
    """
    Show the manifest of the project containing PATH.

    Examples:
        typst-project manifest show
        typst-project manifest show ../my-package
    """
    manifest = _find_manifest(path)
    package = manifest.package

    table = Table(title=f"{package.name} {package.version}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("description", package.description)
    table.add_row("entrypoint", str(package.entrypoint))
    table.add_row("authors", _join(package.authors))
    table.add_row("license", str(package.license))
    table.add_row("homepage", str(package.homepage) if package.homepage else "-")
    table.add_row("repository", str(package.repository) if package.repository else "-")
    table.add_row("keywords", _join(package.keywords))
    table.add_row("categories", _join(package.categories))
    table.add_row("disciplines", _join(package.disciplines))
    table.add_row("compiler", str(package.compiler) if package.compiler else "-")
    table.add_row("exclude", _join(package.exclude))

    if manifest.template is not None:
        table.add_row("template.path", str(manifest.template.path))
        table.add_row("template.entrypoint", str(manifest.template.entrypoint))
        table.add_row("template.thumbnail", str(manifest.template.thumbnail))

    if manifest.tool:
        table.add_row("tool", _join(manifest.tool.keys()))

    console.print(table)


@app.command()
def check(
    path: Annotated[
        Path,
        typer.Argument(help="Path inside the project"),
    ] = Path("."),
) -> None:
    """
    Validate the manifest of the project containing PATH.

    Exits with 0 if the manifest is valid, 1 if it is missing or invalid.
    """
    manifest = _find_manifest(path)
    console.print(
        f"[green]✓[/green] {manifest.package.name} {manifest.package.version} is valid"
    )
