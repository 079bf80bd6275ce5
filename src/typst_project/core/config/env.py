"""
`.env` support for the `TYPST_PROJECT_*` variables.

Two files are read: `typst-project/.env` in the user's config directory and
`.env` in the working directory. The working directory file wins over the
user file, and neither replaces a variable already exported by the shell.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home


def _dotenv_assignments(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    # Bare `KEY` lines have no value and are skipped
    return {k: v for k, v in dotenv_values(path).items() if k and v is not None}


def load_layered_env(
    *,
    cwd: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    local_env_paths: Iterable[Path] | None = None,
) -> None:
    """Export the variables from the user and working directory `.env` files.

    The path arguments replace the default file locations, which tests use
    to point at temporary files.
    """
    if cwd is None:
        cwd = Path.cwd()

    if user_env_paths is None:
        user_env_paths = [get_xdg_config_home() / "typst-project" / ".env"]

    if local_env_paths is None:
        local_env_paths = [cwd / ".env"]

    from_user_file: set[str] = set()
    for path in user_env_paths:
        for key, value in _dotenv_assignments(Path(path)).items():
            if key not in os.environ:
                os.environ[key] = value
                from_user_file.add(key)

    for path in local_env_paths:
        for key, value in _dotenv_assignments(Path(path)).items():
            if key not in os.environ or key in from_user_file:
                os.environ[key] = value
