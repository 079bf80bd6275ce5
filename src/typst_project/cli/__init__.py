"""
typst-project CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from typst_project import __version__
from typst_project.cli import manifest, root, validate
from typst_project.cli.errors import ExitCode, print_error
from typst_project.core.config import get_user_config_path, load_config, load_layered_env

app = typer.Typer(
    name="typst-project",
    help="Find Typst project roots and check typst.toml manifests",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    typst-project - Typst project discovery.

    Locates the root of the Typst project containing a path by looking for
    typst.toml, main.typ, lib.typ and friends, and reads or checks the
    typst.toml package manifest.

    Examples:
        typst-project root                      # Root of the current project
        typst-project manifest show             # Summarize typst.toml
        typst-project validate license MIT      # Check a single value
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        load_config()
    except ValidationError as e:
        print_error(
            f"Invalid configuration in {get_user_config_path()}",
            reason="; ".join(
                f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
                for detail in e.errors()
            ),
            solution="set heuristics.typstfmt to true or false",
        )
        raise typer.Exit(ExitCode.USER_ERROR) from e

    ctx.obj = {"debug": debug}


app.command(name="root")(root.root)
app.command(name="is-root")(root.is_root)
app.add_typer(manifest.app, name="manifest")
app.add_typer(validate.app, name="validate")


@app.command()
def version() -> None:
    """Show typst-project version and exit."""
    console.print(f"typst-project version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
