"""
Project root discovery utilities.

Convenience wrappers around the heuristics resolver which use the
recommended heuristics (a typst.toml manifest, or a main.typ/lib.typ
entrypoint) and only report the root directory.
"""

import os
from pathlib import Path

from typst_project.core.heuristics import RECOMMENDED, root_files
from typst_project.core.heuristics import is_project_root as _is_project_root
from typst_project.core.heuristics import try_find_project_root


def find_project_root(start: str | os.PathLike[str] | None = None) -> Path | None:
    """
    Find the project root directory by searching upward for marker files.

    Searches `start` and then its parents for any of the recommended
    heuristics. The path is used as given: if it is relative, a root above
    the relative prefix won't be found.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory, or None if not found.

    Raises:
        OSError: If a directory on the way can't be read

    Example:
        >>> find_project_root()  # From /thesis/chapters/
        PosixPath('/thesis')
    """
    if start is None:
        start = Path.cwd()

    found = try_find_project_root(start, RECOMMENDED, first=True)
    return found[0] if found is not None else None


def get_project_root(start: str | os.PathLike[str] | None = None) -> Path:
    """
    Get the project root directory, raising an error if not found.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory.

    Raises:
        FileNotFoundError: If no project root can be found.
    """
    root = find_project_root(start)
    if root is None:
        start_dir = Path(start) if start is not None else Path.cwd()
        raise FileNotFoundError(
            f"Could not find project root from {start_dir}. "
            f"Expected one of: {', '.join(_marker_names())}"
        )
    return root


def is_project_root(path: str | os.PathLike[str] | None = None) -> bool:
    """
    Check if a directory matches any of the recommended heuristics.

    Raises:
        OSError: If the directory can't be read
    """
    if path is None:
        path = Path.cwd()
    return _is_project_root(path, RECOMMENDED)


def _marker_names() -> list[str]:
    return [name for name, heuristic in root_files() if heuristic.flags in RECOMMENDED]
