"""Website URLs, e.g. a package's `homepage` or `repository`."""

import string

from typst_project.core.manifest.exceptions import WebsiteInvalidCharError
from typst_project.core.manifest.validated import ValidatedString

_ALLOWED = frozenset(string.ascii_letters + string.digits + "-_.~:/?#[]@!$&'()*+,;=")


def validate_website(text: str) -> None:
    """
    Check that every character of `text` may appear in a URL.

    This only gates the character class, it does not parse the URL.

    Raises:
        WebsiteInvalidCharError: For the first disallowed character
    """
    for c in text:
        if c not in _ALLOWED:
            raise WebsiteInvalidCharError(c)


class Website(ValidatedString):
    """A website such as `https://typst.app`."""

    @classmethod
    def check(cls, text: str) -> None:
        validate_website(text)
