"""GitHub user handles, as used in author contacts (`Name <@handle>`)."""

from typst_project.core.manifest.exceptions import (
    HandleConsecutiveHyphensError,
    HandleEndsWithHyphenError,
    HandleInvalidCharError,
    HandleStartsWithHyphenError,
    HandleTooLongError,
)
from typst_project.core.manifest.validated import ValidatedString

MAX_HANDLE_LENGTH = 39


def _is_ascii_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def validate_github_handle(text: str) -> None:
    """
    Check that `text` is a valid GitHub handle.

    Length and edge hyphens are checked before the characters are scanned,
    so each input reports exactly one deterministic error.

    Raises:
        HandleTooLongError: If longer than 39 characters
        HandleStartsWithHyphenError: If it starts with '-'
        HandleEndsWithHyphenError: If it ends with '-'
        HandleConsecutiveHyphensError: If it contains '--'
        HandleInvalidCharError: If it contains anything but ASCII
            alphanumerics and '-'
    """
    # Measured in UTF-8 bytes, so non-ASCII input can hit this before the scan
    if len(text.encode("utf-8")) > MAX_HANDLE_LENGTH:
        raise HandleTooLongError()

    if text.startswith("-"):
        raise HandleStartsWithHyphenError()

    if text.endswith("-"):
        raise HandleEndsWithHyphenError()

    i = 0
    while i < len(text):
        # Runs of alphanumerics separated by single hyphens
        while i < len(text) and _is_ascii_alnum(text[i]):
            i += 1

        if i == len(text):
            break

        c = text[i]
        i += 1
        if c != "-":
            raise HandleInvalidCharError(c)
        if i < len(text) and text[i] == "-":
            raise HandleConsecutiveHyphensError()


class GitHubHandle(ValidatedString):
    """A GitHub handle such as `reknih`, without the leading '@'."""

    @classmethod
    def check(cls, text: str) -> None:
        validate_github_handle(text)
