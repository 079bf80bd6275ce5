"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < env vars

There is deliberately no project-level config file: configuration decides
how project roots are found, so it can't live inside a project.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import TypstProjectConfig

logger = logging.getLogger(__name__)

_config_cache: TypstProjectConfig | None = None

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


def get_xdg_config_home() -> Path:
    """Directory holding the `typst-project/` config folder."""
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """Location of the user's `config.json`, which may not exist."""
    return get_xdg_config_home() / "typst-project" / "config.json"


def merge_layers(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """
    Lay one config layer over another.

    Tables such as `heuristics` are merged key by key, so a user config that
    only sets `heuristics.typstfmt` keeps every other default in the table.
    """
    result = base.copy()

    for key, value in layer.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_layers(result[key], value)
        else:
            result[key] = value

    return result


def read_config_file(path: Path) -> dict[str, Any] | None:
    """
    Read the JSON object stored in a user config file.

    A missing file, malformed JSON, or a top-level value other than an
    object is logged and treated as no user config at all.
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable config at {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config at {path}: top-level value is not an object")
        return None
    return data


def _parse_bool(raw: str) -> bool | None:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply `TYPST_PROJECT_HEURISTICS_TYPSTFMT` on top of the merged layers.

    Values that are not a recognizable boolean are logged and ignored.
    """
    result = config_dict.copy()

    if (raw := os.environ.get("TYPST_PROJECT_HEURISTICS_TYPSTFMT")) is not None:
        value = _parse_bool(raw)
        if value is None:
            logger.warning(f"Invalid TYPST_PROJECT_HEURISTICS_TYPSTFMT value '{raw}', ignoring")
        else:
            result["heuristics"] = {**result.get("heuristics", {}), "typstfmt": value}

    return result


def get_default_config() -> dict[str, Any]:
    """Optional markers are all off unless the user opts in."""
    return {"heuristics": {"typstfmt": False}}


def load_config(use_cache: bool = True) -> TypstProjectConfig:
    """
    Load the configuration that decides which optional markers are used.

    Layers, highest first: `TYPST_PROJECT_*` variables, the user's
    `config.json`, then the defaults. The result is cached per process
    unless `use_cache` is False.

    Raises:
        ValidationError: If the user config sets an unknown heuristic or a
            non-boolean value
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    user_config_path = get_user_config_path()
    if user_config := read_config_file(user_config_path):
        logger.debug(f"Loaded user config from {user_config_path}")
        merged = merge_layers(merged, user_config)

    merged = apply_env_overrides(merged)

    config = TypstProjectConfig(**merged)
    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    The marker table from `root_files()` has its own cache, so clearing this
    one alone does not change which optional markers the resolver uses.
    """
    global _config_cache
    _config_cache = None
