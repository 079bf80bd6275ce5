"""
typst-project CLI - Root commands.

Find the root directory of the Typst project containing a path.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from typst_project.cli.errors import ExitCode, print_error, print_io_error
from typst_project.core.heuristics import (
    RECOMMENDED,
    Heuristics,
    all_heuristics,
    is_project_root,
    parse_heuristic_name,
    try_find_project_root,
)

console = Console()


def _wanted_heuristics(names: list[str] | None, use_all: bool) -> Heuristics:
    if use_all:
        return all_heuristics()
    if not names:
        return RECOMMENDED

    wanted = Heuristics.empty()
    for name in names:
        try:
            wanted |= parse_heuristic_name(name)
        except ValueError as e:
            print_error(str(e), solution="typst-project root --heuristic manifest-file")
            raise typer.Exit(ExitCode.USER_ERROR) from e
    return wanted


def root(
    path: Annotated[
        Path,
        typer.Argument(help="Path to start searching from"),
    ] = Path("."),
    heuristic: Annotated[
        Optional[list[str]],
        typer.Option(
            "--heuristic",
            "-H",
            help="Heuristic to look for (repeatable), e.g. manifest-file, src-folder",
        ),
    ] = None,
    use_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Look for every available heuristic"),
    ] = False,
    first: Annotated[
        bool,
        typer.Option(
            "--first/--no-first",
            help="Stop inspecting a directory after its first matching marker",
        ),
    ] = True,
) -> None:
    """
    Find the project root containing PATH.

    Prints the root directory and the heuristics it matched. Exits with 1 if
    no ancestor of PATH is a project root. PATH is not resolved, so a
    relative path only searches the directories it names.

    Examples:
        typst-project root                       # From the current directory
        typst-project root chapters/intro        # From a subdirectory
        typst-project root -H manifest-file      # Only look for typst.toml
        typst-project root --all --no-first      # Report every matched marker
    """
    wanted = _wanted_heuristics(heuristic, use_all)

    try:
        found = try_find_project_root(path, wanted, first=first)
    except OSError as e:
        print_io_error(e)
        raise typer.Exit(ExitCode.IO_ERROR) from e

    if found is None:
        print_error(
            f"No project root found from {path}",
            reason=f"Looked for: {wanted}",
            solution="typst-project root --all",
        )
        raise typer.Exit(ExitCode.NOT_FOUND)

    root_dir, matched = found
    console.print(str(root_dir), highlight=False, soft_wrap=True)
    console.print(f"[dim]matched: {matched}[/dim]")


def is_root(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to check"),
    ] = Path("."),
) -> None:
    """
    Check whether PATH itself is a project root.

    Exits with 0 if it is, 1 if it is not.
    """
    try:
        matched = is_project_root(path, RECOMMENDED)
    except OSError as e:
        print_io_error(e)
        raise typer.Exit(ExitCode.IO_ERROR) from e

    if matched:
        console.print(f"[green]✓[/green] {escape(str(path))} is a project root", soft_wrap=True)
        raise typer.Exit(ExitCode.SUCCESS)

    console.print(f"[yellow]✗[/yellow] {escape(str(path))} is not a project root", soft_wrap=True)
    raise typer.Exit(ExitCode.NOT_FOUND)
