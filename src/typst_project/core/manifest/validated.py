"""
Base model for strings constrained by a grammar.

A `ValidatedString` can only be obtained by passing its grammar check, and is
frozen afterwards, so holding one is proof that the text is well-formed.
Subclasses only need to implement `check`.
"""

from typing import Any

from pydantic import ConfigDict, RootModel, field_validator
from typing_extensions import Self


class ValidatedString(RootModel[str]):
    """
    An immutable string which satisfies a grammar for its whole lifetime.

    Constructing an instance (`Website("https://typst.app")`, model
    validation, or as a field of another model) always runs `check`. Use
    `parse` to get the grammar's own exception instead of a pydantic
    `ValidationError`.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def check(cls, text: str) -> None:
        """
        Validate `text` against the grammar.

        Raises:
            ParseError: The grammar-specific error describing the violation
        """
        raise NotImplementedError

    @field_validator("root")
    @classmethod
    def _check_grammar(cls, value: str) -> str:
        cls.check(value)
        return value

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse `text`, raising the grammar's error if it is invalid.

        Raises:
            ParseError: The grammar-specific error describing the violation
        """
        cls.check(text)
        return cls(text)

    def __str__(self) -> str:
        return self.root

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ValidatedString):
            return NotImplemented
        return self.root < other.root
