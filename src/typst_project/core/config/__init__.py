"""
Configuration models and loading.

This module provides Pydantic models for typst-project configuration
with multi-layer merging: defaults < user < env vars.
"""

from .env import load_layered_env
from .loader import (
    clear_cache,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import HeuristicsConfig, TypstProjectConfig

__all__ = [
    # Models
    "HeuristicsConfig",
    "TypstProjectConfig",
    # Loader functions
    "clear_cache",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
