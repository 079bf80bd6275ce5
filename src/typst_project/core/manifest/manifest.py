"""
The `typst.toml` manifest.

A manifest has a required `[package]` table, an optional `[template]` table,
and an optional `[tool]` table holding third-party configuration which is
passed through untouched. Unknown top-level keys are rejected.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError
from typing_extensions import Self

from typst_project.core.heuristics import MANIFEST_FILE, Heuristics, try_find_project_root
from typst_project.core.manifest.exceptions import DeserializeError, SerializeError
from typst_project.core.manifest.package import Package
from typst_project.core.manifest.template import Template

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

_OPTIONAL_SETS = frozenset({"keywords", "categories", "disciplines", "exclude"})


class Manifest(BaseModel):
    """
    A typst.toml manifest.

    Example:
        >>> manifest = Manifest.from_str('''
        ...     [package]
        ...     name = "example"
        ...     version = "0.1.0"
        ...     entrypoint = "src/lib.typ"
        ...     authors = ["John Doe <john@doe.com>"]
        ...     license = "MIT"
        ...     description = "An example package"
        ... ''')
        >>> str(manifest.package.name)
        'example'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    package: Package
    template: Template | None = None
    tool: dict[str, dict[str, Any]] | None = None

    @classmethod
    def from_package(cls, package: Package) -> Self:
        """Create a manifest for a plain package."""
        return cls(package=package)

    @classmethod
    def from_template(cls, package: Package, template: Template) -> Self:
        """Create a manifest for a template package."""
        return cls(package=package, template=template)

    @classmethod
    def from_value(cls, table: dict[str, Any]) -> Self:
        """
        Create a manifest from an already decoded TOML table.

        Raises:
            DeserializeError: If keys are missing/unknown or a field is invalid
        """
        try:
            return cls.model_validate(table)
        except ValidationError as e:
            raise DeserializeError(e) from e

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Create a manifest from the contents of a manifest file.

        Raises:
            DeserializeError: If the text is not valid TOML or not a valid
                manifest
        """
        try:
            table = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DeserializeError(e) from e
        return cls.from_value(table)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Self:
        """
        Read and parse a manifest file.

        Raises:
            OSError: If the file can't be read
            DeserializeError: If the file is not a valid manifest
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        try:
            return cls.from_str(text)
        except DeserializeError as e:
            raise DeserializeError(e.source, path=str(path)) from e.source

    @classmethod
    def try_find(cls, path: str | os.PathLike[str]) -> Self | None:
        """
        Find and parse the manifest of the project containing `path`.

        The project root is the nearest ancestor of `path` (including `path`
        itself) holding a typst.toml file. If `path` is relative, a root
        above the relative prefix won't be found.

        Returns:
            The parsed manifest, or None if no manifest was found

        Raises:
            OSError: If an ancestor or the manifest can't be read
            DeserializeError: If a manifest was found but is invalid
        """
        found = try_find_project_root(path, Heuristics.MANIFEST_FILE, first=True)
        if found is None:
            logger.debug(f"No {MANIFEST_FILE} found above {path}")
            return None

        root, _ = found
        logger.debug(f"Loading manifest from {root / MANIFEST_FILE}")
        return cls.load(root / MANIFEST_FILE)

    def to_value(self) -> dict[str, Any]:
        """
        Convert to a TOML-ready table.

        Unset optional fields and empty optional sets are left out.
        """
        value = self.model_dump(mode="json", exclude_none=True)
        value["package"] = {
            key: field
            for key, field in value["package"].items()
            if not (key in _OPTIONAL_SETS and field == [])
        }
        return value

    def to_toml(self) -> str:
        """
        Serialize as typst.toml contents.

        Raises:
            SerializeError: If the manifest can't be written as TOML
        """
        try:
            return tomli_w.dumps(self.to_value())
        except (TypeError, ValueError) as e:
            raise SerializeError(e) from e
