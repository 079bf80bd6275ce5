"""
typst-project CLI - Validate commands.

Check a single value against one of the manifest grammars without writing
a whole typst.toml.
"""

from collections.abc import Callable
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from typst_project.cli.errors import ExitCode, describe_parse_error
from typst_project.core.manifest import (
    Author,
    EmailAddress,
    GitHubHandle,
    Ident,
    License,
    ParseError,
    Website,
)

app = typer.Typer(
    name="validate",
    help="Check a value against a manifest grammar",
    no_args_is_help=True,
)

console = Console()


def _check(kind: str, value: str, parse: Callable[[str], object]) -> None:
    try:
        parsed = parse(value)
    except ParseError as e:
        console.print(f"[red]✗[/red] invalid {kind}: {escape(repr(value))}")
        console.print(f"  {escape(describe_parse_error(e))}", highlight=False)
        raise typer.Exit(ExitCode.NOT_FOUND) from e

    console.print(f"[green]✓[/green] valid {kind}: {escape(str(parsed))}", highlight=False)


@app.command()
def ident(
    value: Annotated[str, typer.Argument(help="Package name, e.g. cetz")],
) -> None:
    """Check a package name or keyword identifier."""
    _check("identifier", value, Ident.parse)


@app.command()
def handle(
    value: Annotated[str, typer.Argument(help="GitHub handle without the '@'")],
) -> None:
    """Check a GitHub handle."""
    _check("GitHub handle", value, GitHubHandle.parse)


@app.command()
def website(
    value: Annotated[str, typer.Argument(help="URL, e.g. https://typst.app")],
) -> None:
    """Check a homepage or repository URL."""
    _check("website", value, Website.parse)


@app.command()
def email(
    value: Annotated[str, typer.Argument(help="Email address")],
) -> None:
    """Check an email address."""
    _check("email address", value, EmailAddress.parse)


@app.command()
def license(
    value: Annotated[str, typer.Argument(help="SPDX expression, e.g. 'MIT OR Apache-2.0'")],
) -> None:
    """
    Check an SPDX license expression.

    Every license in the expression must be a known SPDX id and OSI
    approved. `LicenseRef-` and `DocumentRef-` references are rejected.
    """
    _check("license", value, License.parse)


@app.command()
def author(
    value: Annotated[str, typer.Argument(help="Author entry, e.g. 'Martin <@reknih>'")],
) -> None:
    """
    Check an author entry.

    Examples:
        typst-project validate author "Martin"
        typst-project validate author "Martin <@reknih>"
        typst-project validate author "Martin <https://mha.ug>"
    """
    _check("author", value, Author.parse)
