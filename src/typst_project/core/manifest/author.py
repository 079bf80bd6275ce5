"""
Package authors.

An author entry is written as `Name` or `Name <contact>`, where the contact
is one of:
    - a GitHub handle:  `Martin <@reknih>`
    - a website:        `Martin <https://mha.ug>`
    - an email address: `Martin <martin.haug@typst.app>`

The contact kind is picked from its prefix ('@' for handles, 'http' for
websites, anything else is an email address) and then validated by that
kind's own grammar.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator
from typing_extensions import Self

from typst_project.core.manifest.email import EmailAddress
from typst_project.core.manifest.exceptions import (
    EmptyContactError,
    InvalidEmailContactError,
    InvalidGitHubHandleContactError,
    InvalidWebsiteContactError,
    ParseEmailError,
    ParseGitHubHandleError,
    ParseWebsiteError,
    UnclosedContactError,
)
from typst_project.core.manifest.github_handle import GitHubHandle
from typst_project.core.manifest.website import Website

Contact = Union[GitHubHandle, Website, EmailAddress]


def parse_contact(body: str) -> Contact:
    """
    Classify and validate the text between '<' and '>'.

    Raises:
        InvalidGitHubHandleContactError: For a bad '@handle'
        InvalidWebsiteContactError: For a bad 'http...' website
        InvalidEmailContactError: For a bad email address
    """
    if body.startswith("@"):
        try:
            return GitHubHandle.parse(body[1:])
        except ParseGitHubHandleError as e:
            raise InvalidGitHubHandleContactError(e) from e

    if body.startswith("http"):
        try:
            return Website.parse(body)
        except ParseWebsiteError as e:
            raise InvalidWebsiteContactError(e) from e

    try:
        return EmailAddress.parse(body)
    except ParseEmailError as e:
        raise InvalidEmailContactError(e) from e


def _written_kind(contact: Contact) -> type:
    # The kind `parse_contact` picks when the contact is read back
    if isinstance(contact, GitHubHandle):
        return GitHubHandle
    return Website if str(contact).startswith("http") else EmailAddress


def parse_author(text: str) -> tuple[str, Contact | None]:
    """
    Split an author entry into its name and optional contact.

    Everything before the first '<' is the name, trimmed. Text after the
    closing '>' is ignored.

    Raises:
        EmptyContactError: If nothing is between '<' and '>'
        UnclosedContactError: If the '>' is missing
        InvalidContactError: If the contact breaks its own grammar
    """
    name, sep, rest = text.partition("<")
    if not sep:
        return text.strip(), None

    body, closed, _ = rest.partition(">")
    if not body:
        raise EmptyContactError()
    if not closed:
        raise UnclosedContactError()

    return name.strip(), parse_contact(body)


class Author(BaseModel):
    """
    A package author with an optional contact.

    An author built from fields must still read back as the same entry, so
    a `Website` contact has to start with 'http' and an `EmailAddress` must
    not. The name is kept as given and should not contain '<'.

    Example:
        >>> author = Author.parse("Martin <@reknih>")
        >>> author.name, str(author.contact)
        ('Martin', 'reknih')
        >>> str(author)
        'Martin <@reknih>'
    """

    model_config = ConfigDict(frozen=True)

    name: str
    contact: Contact | None = None

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse an author entry, raising the grammar's error if it is invalid.

        Raises:
            ParseAuthorError: The specific author or contact error
        """
        name, contact = parse_author(text)
        return cls(name=name, contact=contact)

    @model_validator(mode="before")
    @classmethod
    def _parse_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            name, contact = parse_author(data)
            return {"name": name, "contact": contact}
        if isinstance(data, dict) and isinstance(data.get("contact"), str):
            # A raw contact string is classified the same way as in `Name <contact>`
            return {**data, "contact": parse_contact(data["contact"])}
        return data

    @model_validator(mode="after")
    def _check_contact_kind(self) -> Self:
        if self.contact is not None and _written_kind(self.contact) is not type(self.contact):
            raise ValueError(
                f"{type(self.contact).__name__} contact {str(self.contact)!r} would be "
                f"read back as a {_written_kind(self.contact).__name__}"
            )
        return self

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.contact is None:
            return self.name

        if isinstance(self.contact, GitHubHandle):
            contact = f"<@{self.contact}>"
        else:
            contact = f"<{self.contact}>"

        return f"{self.name} {contact}" if self.name else contact
