"""
Configuration data models for typst-project.

These models define the structure of ~/.config/typst-project/config.json,
with validation and type safety via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field


class HeuristicsConfig(BaseModel):
    """
    Start-up selection of optional root markers.

    Optional markers are added to (or left out of) the marker table once,
    when the marker table is first used.
    """

    model_config = ConfigDict(extra="forbid")

    typstfmt: bool = Field(
        default=False,
        description="Treat a typstfmt.toml formatter config as a project root marker",
    )


class TypstProjectConfig(BaseModel):
    """Root configuration for typst-project."""

    model_config = ConfigDict(extra="ignore")

    heuristics: HeuristicsConfig = Field(default_factory=HeuristicsConfig)
