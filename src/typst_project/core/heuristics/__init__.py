"""
Heuristic project root discovery.

Public API:
    Models:
        - Heuristic: A single marker (manifest file, entrypoint, ...)
        - Heuristics: Flag set of heuristics
        - RECOMMENDED, all_heuristics(): Predefined heuristic sets
        - root_files(), SRC_FILES: Ordered marker tables

    Resolver functions:
        - project_root: Which heuristics a directory matches
        - is_project_root: Whether a directory matches any heuristic
        - try_find_project_root: Nearest matching ancestor of a path

Example:
    >>> from typst_project.core.heuristics import Heuristics, try_find_project_root
    >>> try_find_project_root(Path.cwd(), Heuristics.MANIFEST_FILE)
    (PosixPath('/home/me/thesis'), <Heuristics.MANIFEST_FILE: 1>)
"""

from typst_project.core.heuristics.models import (
    MANIFEST_FILE,
    RECOMMENDED,
    SRC_DIR,
    SRC_FILES,
    Heuristic,
    Heuristics,
    all_heuristics,
    build_root_files,
    parse_heuristic_name,
    root_files,
)
from typst_project.core.heuristics.resolver import (
    is_project_root,
    project_root,
    try_find_project_root,
)

__all__ = [
    # Models
    "Heuristic",
    "Heuristics",
    "RECOMMENDED",
    "root_files",
    "all_heuristics",
    "SRC_FILES",
    "SRC_DIR",
    "MANIFEST_FILE",
    "build_root_files",
    "parse_heuristic_name",
    # Resolver functions
    "project_root",
    "is_project_root",
    "try_find_project_root",
]
