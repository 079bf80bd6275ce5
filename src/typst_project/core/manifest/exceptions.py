"""
Custom exceptions for manifest parsing and validation.

Every grammar has its own error family so callers can tell exactly which
rule a value broke, e.g. a bad email in an author entry versus a bad GitHub
handle. Grammar errors are also `ValueError`s, which lets pydantic report
them as ordinary field validation failures.

Exception Hierarchy:
    ManifestError (base)
    ├── DeserializeError (manifest text/table could not be read)
    ├── SerializeError (manifest could not be written)
    └── ParseError (a constrained string broke its grammar)
        ├── ParseIdentError
        │   ├── EmptyIdentError
        │   └── InvalidIdentCharError
        ├── ParseGitHubHandleError
        │   ├── HandleTooLongError
        │   ├── HandleStartsWithHyphenError
        │   ├── HandleEndsWithHyphenError
        │   ├── HandleConsecutiveHyphensError
        │   └── HandleInvalidCharError
        ├── ParseWebsiteError
        │   └── WebsiteInvalidCharError
        ├── ParseEmailError
        ├── ParseLicenseError
        │   ├── LicenseExpressionError
        │   ├── LicenseReferencerError
        │   └── NotOsiApprovedError
        └── ParseAuthorError
            ├── EmptyContactError
            ├── UnclosedContactError
            └── InvalidContactError
                ├── InvalidGitHubHandleContactError
                ├── InvalidWebsiteContactError
                └── InvalidEmailContactError

Example:
    >>> from typst_project.core.manifest import Author
    >>> try:
    ...     Author.parse("Martin <@-reknih>")
    ... except InvalidGitHubHandleContactError as e:
    ...     print(type(e.error).__name__)
    HandleStartsWithHyphenError
"""

from typing import Any


class ManifestError(Exception):
    """
    Base exception for all manifest-related errors.

    Attributes:
        message: Human-readable error message
        context: Optional dictionary of additional context
    """

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (self.message, self.context) == (other.message, other.context)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class DeserializeError(ManifestError):
    """
    Raised when a manifest document can't be turned into a `Manifest`.

    Wraps either the TOML decoder's error (malformed text) or pydantic's
    `ValidationError` (missing/unknown keys, invalid field values). The
    wrapped error is available as `source` and as `__cause__`.
    """

    def __init__(self, source: Exception, path: str | None = None) -> None:
        location = f" in {path}" if path else ""
        super().__init__(f"deserialization failed{location}: {source}", path=path)
        self.source = source
        self.path = path

    def grammar_errors(self) -> list["ParseError"]:
        """
        Collect the grammar errors behind a validation failure.

        Returns:
            The `ParseError`s raised by field validators, in pydantic's
            reporting order; empty if the failure was structural
        """
        errors_fn = getattr(self.source, "errors", None)
        if errors_fn is None:
            return []

        found: list[ParseError] = []
        details: list[dict[str, Any]] = errors_fn()
        for detail in details:
            error = (detail.get("ctx") or {}).get("error")
            if isinstance(error, ParseError):
                found.append(error)
        return found


class SerializeError(ManifestError):
    """Raised when a `Manifest` can't be written as TOML."""

    def __init__(self, source: Exception) -> None:
        super().__init__(f"serialization failed: {source}")
        self.source = source


class ParseError(ManifestError, ValueError):
    """Base exception for grammar violations in constrained strings."""


# ==============================================================================
# Identifier
# ==============================================================================


class ParseIdentError(ParseError):
    """An identifier broke the identifier grammar."""


class EmptyIdentError(ParseIdentError):
    def __init__(self) -> None:
        super().__init__("identifier must not be empty")


class InvalidIdentCharError(ParseIdentError):
    """An identifier contained a character outside its allowed class."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"identifier contained invalid character {char!r} at position {position}",
            char=char,
            position=position,
        )
        self.char = char
        self.position = position


# ==============================================================================
# GitHub handle
# ==============================================================================


class ParseGitHubHandleError(ParseError):
    """A GitHub handle broke the handle grammar."""


class HandleTooLongError(ParseGitHubHandleError):
    def __init__(self) -> None:
        super().__init__("handle must not be longer than 39 characters")


class HandleStartsWithHyphenError(ParseGitHubHandleError):
    def __init__(self) -> None:
        super().__init__("handle must not start with a '-'")


class HandleEndsWithHyphenError(ParseGitHubHandleError):
    def __init__(self) -> None:
        super().__init__("handle must not end with a '-'")


class HandleConsecutiveHyphensError(ParseGitHubHandleError):
    def __init__(self) -> None:
        super().__init__("handle must not contain '--'")


class HandleInvalidCharError(ParseGitHubHandleError):
    def __init__(self, char: str) -> None:
        super().__init__(
            f"handle must only contain alpha numeric characters and '-', contained {char!r}",
            char=char,
        )
        self.char = char


# ==============================================================================
# Website
# ==============================================================================


class ParseWebsiteError(ParseError):
    """A website broke the website character class."""


class WebsiteInvalidCharError(ParseWebsiteError):
    def __init__(self, char: str) -> None:
        super().__init__(f"website contained invalid character {char!r}", char=char)
        self.char = char


# ==============================================================================
# Email
# ==============================================================================


class ParseEmailError(ParseError):
    """An email address was rejected by the email validator."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid email address: {reason}", reason=reason)
        self.reason = reason


# ==============================================================================
# License
# ==============================================================================


class ParseLicenseError(ParseError):
    """A license expression was rejected."""


class LicenseExpressionError(ParseLicenseError):
    """The expression is not a valid SPDX expression of known license ids."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid license expression: {reason}", reason=reason)
        self.reason = reason


class LicenseReferencerError(ParseLicenseError):
    """The expression refers to a user-defined license instead of an SPDX id."""

    def __init__(self, reference: str) -> None:
        super().__init__(
            f"license expression must not contain referencer {reference!r}",
            reference=reference,
        )
        self.reference = reference


class NotOsiApprovedError(ParseLicenseError):
    """The expression contains a license that is not OSI-approved."""

    def __init__(self, license_id: str) -> None:
        super().__init__(
            f"license {license_id!r} must be OSI-approved",
            license_id=license_id,
        )
        self.license_id = license_id


# ==============================================================================
# Author
# ==============================================================================


class ParseAuthorError(ParseError):
    """An author entry broke the `Name <contact>` grammar."""


class EmptyContactError(ParseAuthorError):
    def __init__(self) -> None:
        super().__init__("no contact between '<' and '>'")


class UnclosedContactError(ParseAuthorError):
    def __init__(self) -> None:
        super().__init__("missing '>'")


class InvalidContactError(ParseAuthorError):
    """
    The contact between '<' and '>' broke its own grammar.

    Attributes:
        error: The underlying grammar error
    """

    kind = "contact"

    def __init__(self, error: ParseError) -> None:
        super().__init__(f"invalid {self.kind}: {error}", error=error)
        self.error = error


class InvalidGitHubHandleContactError(InvalidContactError):
    kind = "GitHub handle"


class InvalidWebsiteContactError(InvalidContactError):
    kind = "website"


class InvalidEmailContactError(InvalidContactError):
    kind = "email address"


__all__ = [
    "ManifestError",
    "DeserializeError",
    "SerializeError",
    "ParseError",
    "ParseIdentError",
    "EmptyIdentError",
    "InvalidIdentCharError",
    "ParseGitHubHandleError",
    "HandleTooLongError",
    "HandleStartsWithHyphenError",
    "HandleEndsWithHyphenError",
    "HandleConsecutiveHyphensError",
    "HandleInvalidCharError",
    "ParseWebsiteError",
    "WebsiteInvalidCharError",
    "ParseEmailError",
    "ParseLicenseError",
    "LicenseExpressionError",
    "LicenseReferencerError",
    "NotOsiApprovedError",
    "ParseAuthorError",
    "EmptyContactError",
    "UnclosedContactError",
    "InvalidContactError",
    "InvalidGitHubHandleContactError",
    "InvalidWebsiteContactError",
    "InvalidEmailContactError",
]
