"""Utility modules for typst-project."""

from .project import find_project_root, get_project_root, is_project_root

__all__ = [
    "find_project_root",
    "get_project_root",
    "is_project_root",
]
