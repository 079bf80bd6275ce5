"""
Heuristic registry for project root discovery.

A heuristic is a single named marker whose presence in a directory signals
that the directory is the root of a Typst project. Heuristics are combined
into a `Heuristics` flag set, which is what callers pass to the resolver to
say which markers they care about and what the resolver returns to say which
markers it actually found.

Marker Tables:
    root_files(): files looked up directly in a candidate directory
    SRC_FILES: files looked up one level deeper, inside a `src/` folder

The optional `typstfmt.toml` marker is only part of root_files() when the
`heuristics.typstfmt` configuration flag is enabled when the table is
first built.
"""

from enum import Enum, Flag, auto
from functools import lru_cache, reduce
from operator import or_

from typst_project.core.config import load_config

MANIFEST_FILE = "typst.toml"
"""The name of the Typst manifest file."""

MAIN_FILE = "main.typ"
LIB_FILE = "lib.typ"
TYPSTFMT_CONFIG_FILE = "typstfmt.toml"
SRC_DIR = "src"


class Heuristics(Flag):
    """A set of heuristics."""

    MANIFEST_FILE = auto()
    """A `typst.toml` manifest file."""

    MAIN_FILE = auto()
    """A `main.typ` entrypoint."""

    LIB_FILE = auto()
    """A `lib.typ` entrypoint."""

    SRC_FOLDER = auto()
    """The entrypoint was found inside a `src/` folder."""

    TYPSTFMT_CONFIG = auto()
    """A `typstfmt.toml` formatter config file."""

    @classmethod
    def empty(cls) -> "Heuristics":
        """Return the set containing no heuristics."""
        return cls(0)

    def is_empty(self) -> bool:
        return not self

    def __str__(self) -> str:
        """Format as NAME|NAME, or EMPTY for the empty set."""
        names = [member.name for member in Heuristics if member in self and member.name]
        return "|".join(names) if names else "EMPTY"


class Heuristic(Enum):
    """A single heuristic, see `Heuristics` for combinations."""

    MANIFEST_FILE = "manifest-file"
    MAIN_FILE = "main-file"
    MAIN_FILE_IN_SRC = "main-file-in-src"
    LIB_FILE = "lib-file"
    LIB_FILE_IN_SRC = "lib-file-in-src"
    TYPSTFMT_CONFIG = "typstfmt-config"

    @property
    def in_src(self) -> bool:
        """Whether the marker lives inside a `src/` folder."""
        return self in (Heuristic.MAIN_FILE_IN_SRC, Heuristic.LIB_FILE_IN_SRC)

    @property
    def flags(self) -> Heuristics:
        """The exact bit combination this heuristic maps to."""
        return _HEURISTIC_FLAGS[self]


_HEURISTIC_FLAGS: dict[Heuristic, Heuristics] = {
    Heuristic.MANIFEST_FILE: Heuristics.MANIFEST_FILE,
    Heuristic.MAIN_FILE: Heuristics.MAIN_FILE,
    Heuristic.MAIN_FILE_IN_SRC: Heuristics.MAIN_FILE | Heuristics.SRC_FOLDER,
    Heuristic.LIB_FILE: Heuristics.LIB_FILE,
    Heuristic.LIB_FILE_IN_SRC: Heuristics.LIB_FILE | Heuristics.SRC_FOLDER,
    Heuristic.TYPSTFMT_CONFIG: Heuristics.TYPSTFMT_CONFIG,
}

MarkerTable = tuple[tuple[str, Heuristic], ...]


def build_root_files(typstfmt: bool = False) -> MarkerTable:
    """
    Build the ordered table of markers looked up in a candidate directory.

    Table order is the tie-break when more than one marker could describe
    the same file name.

    Args:
        typstfmt: Include the optional `typstfmt.toml` marker

    Returns:
        Tuple of (file name, heuristic) pairs
    """
    table: list[tuple[str, Heuristic]] = [
        (MANIFEST_FILE, Heuristic.MANIFEST_FILE),
        (MAIN_FILE, Heuristic.MAIN_FILE),
        (LIB_FILE, Heuristic.LIB_FILE),
    ]
    if typstfmt:
        table.append((TYPSTFMT_CONFIG_FILE, Heuristic.TYPSTFMT_CONFIG))
    return tuple(table)


SRC_FILES: MarkerTable = (
    (MAIN_FILE, Heuristic.MAIN_FILE_IN_SRC),
    (LIB_FILE, Heuristic.LIB_FILE_IN_SRC),
)

RECOMMENDED = Heuristics.MANIFEST_FILE | Heuristics.MAIN_FILE | Heuristics.LIB_FILE
"""The heuristics used by the convenience entry points."""


@lru_cache(maxsize=None)
def root_files() -> MarkerTable:
    """
    The active marker table for candidate directories.

    Built once per process from configuration, on first use.
    """
    return build_root_files(typstfmt=load_config().heuristics.typstfmt)


def all_heuristics() -> Heuristics:
    """Every heuristic reachable through the active marker tables."""
    return reduce(or_, (h.flags for _, h in root_files() + SRC_FILES), Heuristics.empty())


def parse_heuristic_name(name: str) -> Heuristics:
    """
    Look up a heuristic flag by name.

    Accepts flag names in any case, with '-' or '_' separators
    (e.g. "manifest-file", "SRC_FOLDER").

    Raises:
        ValueError: If no heuristic has that name
    """
    key = name.strip().upper().replace("-", "_")
    try:
        return Heuristics[key]
    except KeyError:
        valid = ", ".join(m.name.lower().replace("_", "-") for m in Heuristics if m.name)
        raise ValueError(f"Unknown heuristic '{name}'. Expected one of: {valid}") from None
