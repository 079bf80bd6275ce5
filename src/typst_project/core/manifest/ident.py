"""Package identifiers, e.g. the `name` of a package."""

from typst_project.core.manifest.exceptions import EmptyIdentError, InvalidIdentCharError
from typst_project.core.manifest.validated import ValidatedString


def _is_id_start(c: str) -> bool:
    # str.isidentifier() covers XID_Start and '_'
    return c.isidentifier()


def _is_id_continue(c: str) -> bool:
    return c == "-" or f"_{c}".isidentifier()


def validate_ident(text: str) -> None:
    """
    Check that `text` is a valid identifier.

    The first character must be an identifier start character or '_', every
    following character an identifier continue character, '_' or '-'.

    Raises:
        EmptyIdentError: If `text` is empty
        InvalidIdentCharError: For the first character outside its class
    """
    if not text:
        raise EmptyIdentError()

    if not _is_id_start(text[0]):
        raise InvalidIdentCharError(text[0], 0)

    for position, c in enumerate(text[1:], start=1):
        if not _is_id_continue(c):
            raise InvalidIdentCharError(c, position)


class Ident(ValidatedString):
    """An identifier such as `cetz` or `my-package`."""

    @classmethod
    def check(cls, text: str) -> None:
        validate_ident(text)
