"""
Project root resolution.

Walks a path and its ancestors, applying the heuristic registry to each
directory until one of them matches. Every function here reads the
filesystem directly; nothing is cached between calls.
"""

import logging
import os
from pathlib import Path

from typst_project.core.heuristics.models import (
    SRC_DIR,
    SRC_FILES,
    Heuristic,
    Heuristics,
    MarkerTable,
    root_files,
)

logger = logging.getLogger(__name__)


def _lookup(name: str, heuristics: Heuristics, table: MarkerTable) -> Heuristic | None:
    for marker, heuristic in table:
        if heuristic.flags in heuristics and name == marker:
            return heuristic
    return None


def _src_entry(path: Path, heuristics: Heuristics) -> Heuristic | None:
    with os.scandir(path) as entries:
        for entry in entries:
            # Only files are expected in here, anything else ends the lookup.
            if not entry.is_file(follow_symlinks=False):
                return None

            heuristic = _lookup(entry.name, heuristics, SRC_FILES)
            if heuristic is not None:
                return heuristic

    return None


def _dir_entry(entry: os.DirEntry[str], heuristics: Heuristics) -> Heuristic | None:
    if entry.is_file(follow_symlinks=False):
        return _lookup(entry.name, heuristics, root_files())

    if (
        entry.name == SRC_DIR
        and Heuristics.SRC_FOLDER in heuristics
        and entry.is_dir(follow_symlinks=False)
    ):
        return _src_entry(Path(entry.path), heuristics)

    return None


def project_root(
    path: str | os.PathLike[str],
    heuristics: Heuristics,
    first: bool = False,
) -> Heuristics:
    """
    Check which of the given heuristics a directory matches.

    The directory is listed once. Scanning stops after the first matched
    heuristic if `first` is True, or once every wanted heuristic matched.

    Args:
        path: Directory to inspect
        heuristics: The heuristics to look for
        first: Return as soon as any heuristic matched

    Returns:
        The matched subset of `heuristics`, empty if nothing matched

    Raises:
        OSError: If the directory or one of its entries can't be read

    Example:
        >>> project_root(Path("/project"), all_heuristics(), first=False)
        <Heuristics.MANIFEST_FILE|LIB_FILE: 5>
    """
    matched = Heuristics.empty()

    with os.scandir(path) as entries:
        for entry in entries:
            heuristic = _dir_entry(entry, heuristics)
            if heuristic is None:
                continue

            logger.debug(f"Matched {heuristic.value} in {path}: {entry.name}")
            matched |= heuristic.flags

            if first or matched == heuristics:
                break

    return matched


def is_project_root(path: str | os.PathLike[str], heuristics: Heuristics) -> bool:
    """
    Check if a directory matches any of the given heuristics.

    See `project_root` if you need to know which heuristics matched.

    Raises:
        OSError: If the directory can't be read
    """
    return not project_root(path, heuristics, first=True).is_empty()


def try_find_project_root(
    path: str | os.PathLike[str],
    heuristics: Heuristics,
    first: bool = True,
) -> tuple[Path, Heuristics] | None:
    """
    Find the nearest ancestor of `path` which matches the given heuristics.

    Checks `path` itself first, then each parent from nearest to farthest.
    The walk ends at the first directory matching *any* heuristic, even if
    not all of `heuristics` were satisfied there.

    The path is not resolved: a relative path only exposes the ancestors
    present in the path itself, so a root lying above the relative prefix
    won't be found.

    Args:
        path: Directory to start searching from
        heuristics: The heuristics to look for
        first: Stop inspecting a directory after its first match

    Returns:
        The matching ancestor and the heuristics it matched, or None if no
        ancestor matched

    Raises:
        OSError: If any ancestor can't be read

    Example:
        >>> try_find_project_root(Path("/project/chapters"), RECOMMENDED)
        (PosixPath('/project'), <Heuristics.MANIFEST_FILE: 1>)
    """
    start = Path(path)

    for ancestor in (start, *start.parents):
        logger.debug(f"Inspecting {ancestor} for {heuristics}")
        matched = project_root(ancestor, heuristics, first)
        if not matched.is_empty():
            return ancestor, matched

    return None
