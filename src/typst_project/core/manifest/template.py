"""
Typst template metadata.

Given the following template package:

    .
    ├ typst.toml
    ├ assets
    │ └ thumbnail.png
    └ template
      ├ chapters
      │ ├ chapter-1.typ
      │ └ chapter-2.typ
      └ main.typ

its manifest has a `[template]` table like this:

    [template]
    path = "template"
    entrypoint = "chapters/chapter-1.typ"
    thumbnail = "assets/thumbnail.png"
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Template(BaseModel):
    """The `template` table, storing a template's metadata."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path = Field(
        ...,
        description="Directory, relative to the package root, copied into a new project",
    )
    entrypoint: Path = Field(
        ...,
        description="File, relative to the template path, serving as the compilation target",
    )
    thumbnail: Path = Field(
        ...,
        description="PNG or lossless WebP thumbnail, relative to the package root",
    )
