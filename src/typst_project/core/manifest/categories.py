"""
Package categories.

Labels follow the Typst package index's CATEGORIES.md and are written in
kebab-case in the manifest.
"""

from enum import Enum


class Category(str, Enum):
    """A package's category."""

    COMPONENTS = "components"
    """Building blocks for documents: boxes, layout elements, icon packs, color palettes."""

    VISUALIZATION = "visualization"
    """Visual representations of data, information, and models."""

    MODEL = "model"
    """Tools for managing semantic information and references, e.g. glossaries."""

    LAYOUT = "layout"
    """Primitives and helpers for advanced layouts and page setup."""

    TEXT = "text"
    """Packages that transform text and strings or are focused on fonts."""

    LANGUAGES = "languages"
    """Localization, internationalization, and multi-script documents."""

    SCRIPTING = "scripting"
    """Packages focused on the programmatic aspect of Typst."""

    INTEGRATION = "integration"
    """Integrations with third-party tools and formats, including plugins."""

    UTILITY = "utility"
    """Auxiliary packages and tools, e.g. for compatibility or authoring packages."""

    FUN = "fun"
    """Unique uses of Typst that are not necessarily practical."""

    BOOK = "book"
    """Long-form fiction and non-fiction books with multiple chapters."""

    REPORT = "report"
    """Multipage informational or investigative documents on a single topic."""

    PAPER = "paper"
    """A scientific treatment on a research question."""

    THESIS = "thesis"
    """A final long-form deliverable concluding an academic degree."""

    POSTER = "poster"
    """A large-scale graphics-heavy presentation of a topic."""

    FLYER = "flyer"
    """Graphics-heavy, small leaflets intended for massive circulation."""

    PRESENTATION = "presentation"
    """Slides for a projected, oral presentation."""

    CV = "cv"
    """A résumé or curriculum vitæ."""

    OFFICE = "office"
    """Staples for the day-to-day in an office, such as a letter or an invoice."""

    def __str__(self) -> str:
        return self.value


FUNCTIONAL_CATEGORIES: tuple[Category, ...] = (
    Category.COMPONENTS,
    Category.FUN,
    Category.INTEGRATION,
    Category.LANGUAGES,
    Category.LAYOUT,
    Category.MODEL,
    Category.SCRIPTING,
    Category.TEXT,
    Category.UTILITY,
    Category.VISUALIZATION,
)
"""Categories describing the functionality a package provides, ordered by label."""

PUBLICATION_CATEGORIES: tuple[Category, ...] = (
    Category.BOOK,
    Category.CV,
    Category.FLYER,
    Category.OFFICE,
    Category.PAPER,
    Category.POSTER,
    Category.PRESENTATION,
    Category.REPORT,
    Category.THESIS,
)
"""Categories related to publication, commonly used by templates, ordered by label."""

ALL_CATEGORIES: tuple[Category, ...] = tuple(
    sorted(FUNCTIONAL_CATEGORIES + PUBLICATION_CATEGORIES, key=lambda c: c.value)
)
"""Every category, ordered by label."""
