"""
Typst package metadata.

The `[package]` table of a manifest. Field-level validation is delegated to
the constrained string types (`Ident`, `License`, `Website`, `Author`) and to
`semver` for versions; there are no cross-field rules.
"""

from pathlib import Path
from typing import Annotated, Any

import semver
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    SerializerFunctionWrapHandler,
    field_serializer,
)

from typst_project.core.manifest.author import Author
from typst_project.core.manifest.categories import Category
from typst_project.core.manifest.disciplines import Discipline
from typst_project.core.manifest.ident import Ident
from typst_project.core.manifest.license import License
from typst_project.core.manifest.website import Website


def _parse_version(value: Any) -> semver.Version:
    if isinstance(value, semver.Version):
        return value
    if not isinstance(value, str):
        raise ValueError(f"version must be a string, got {type(value).__name__}")
    return semver.Version.parse(value)


Version = Annotated[
    semver.Version,
    PlainValidator(_parse_version),
    PlainSerializer(str, return_type=str),
]
"""A semantic version, written as a string such as `0.1.0`."""


class Package(BaseModel):
    """The `package` table, storing a package's metadata."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    name: Ident = Field(..., description="The name of the package")
    version: Version = Field(..., description="The current version of the package")
    entrypoint: Path = Field(..., description="The primary module of the package")
    authors: frozenset[Author] = Field(..., description="The authors of the package")
    license: License = Field(..., description="The license expression for the package")
    description: str = Field(..., description="The description of the package")

    homepage: Website | None = Field(default=None, description="The homepage URL")
    repository: Website | None = Field(default=None, description="The repository URL")
    keywords: frozenset[str] = Field(default_factory=frozenset)
    categories: frozenset[Category] = Field(default_factory=frozenset)
    disciplines: frozenset[Discipline] = Field(default_factory=frozenset)
    compiler: Version | None = Field(
        default=None, description="The minimum compiler version for the package"
    )
    exclude: frozenset[Path] = Field(
        default_factory=frozenset,
        description="Paths ignored by the package manager's bundler",
    )

    @field_serializer("authors", "keywords", "categories", "disciplines", "exclude", mode="wrap")
    def _sorted(self, value: frozenset[Any], handler: SerializerFunctionWrapHandler) -> list[Any]:
        # Sets have no order of their own; write them sorted so output is stable.
        return sorted(handler(value), key=str)
