"""
Standardized error handling and exit codes for the typst-project CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from typst_project.core.manifest import DeserializeError, InvalidContactError, ParseError

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for typst-project CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    NOT_FOUND = 1
    """No project root or manifest was found, or a check failed."""

    USER_ERROR = 2
    """Invalid input given on the command line."""

    IO_ERROR = 3
    """The filesystem could not be read."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "No project root found",
        ...     reason="No typst.toml, main.typ or lib.typ above /tmp",
        ...     solution="typst-project root --all",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}", soft_wrap=True)

    if reason:
        console.print(f"[dim]{reason}[/dim]", soft_wrap=True)

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}", soft_wrap=True)


def print_io_error(error: OSError) -> None:
    """Print error when a directory or file can't be read."""
    print_error(
        f"Could not read {error.filename or 'the filesystem'}",
        reason=error.strerror or str(error),
    )


def describe_parse_error(error: ParseError) -> str:
    """
    Describe a grammar error, naming the sub-grammar for author contacts.

    Example:
        >>> describe_parse_error(InvalidGitHubHandleContactError(HandleTooLongError()))
        'InvalidGitHubHandleContactError → HandleTooLongError: handle must not be ...'
    """
    if isinstance(error, InvalidContactError):
        return f"{type(error).__name__} → {type(error.error).__name__}: {error.error}"
    return f"{type(error).__name__}: {error}"


def print_deserialize_error(error: DeserializeError) -> None:
    """Print every field error behind an invalid manifest."""
    source = error.source
    location = f" at {error.path}" if error.path else ""

    if not isinstance(source, ValidationError):
        print_error(f"Manifest{location} is not valid TOML", reason=escape(str(source)))
        return

    print_error(f"Invalid manifest{location}")
    for detail in source.errors():
        field = ".".join(str(part) for part in detail["loc"])
        cause = (detail.get("ctx") or {}).get("error")
        message = describe_parse_error(cause) if isinstance(cause, ParseError) else detail["msg"]
        console.print(f"  [yellow]•[/yellow] {field}: {escape(message)}", soft_wrap=True)
