"""
typst-project - Typst project discovery and manifest parsing

Finds the root directory of a Typst project by looking for marker files in
ancestor directories, and parses/validates typst.toml package manifests.
"""

__version__ = "0.1.0"

from typst_project.core.heuristics import Heuristic, Heuristics
from typst_project.core.manifest import Manifest
from typst_project.utils.project import find_project_root, get_project_root, is_project_root

# Same entry point under the resolver's name
try_find_project_root = find_project_root

__all__ = [
    "Heuristic",
    "Heuristics",
    "Manifest",
    "find_project_root",
    "get_project_root",
    "is_project_root",
    "try_find_project_root",
    "__version__",
]
