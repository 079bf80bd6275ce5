"""
Pytest configuration and shared fixtures.

Provides fixtures for temporary Typst project trees, manifest text, and
isolation from the user's configuration and environment.
"""

from pathlib import Path

import pytest

from typst_project.core.config import clear_cache
from typst_project.core.heuristics import root_files

# ==============================================================================
# Isolation Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """
    Keep tests away from the real user config and .env files.

    Points XDG_CONFIG_HOME at an empty directory, unsets the env override,
    and resets the cached config and marker table around each test.
    """
    config_home = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", raising=False)

    clear_cache()
    root_files.cache_clear()
    yield config_home
    clear_cache()
    root_files.cache_clear()


@pytest.fixture
def user_config_dir(isolated_config):
    """Provide a temporary XDG_CONFIG_HOME/typst-project directory."""
    config_dir = isolated_config / "typst-project"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


# ==============================================================================
# Project Tree Fixtures
# ==============================================================================


MANIFEST_TOML = """\
[package]
name = "example"
version = "0.1.0"
entrypoint = "src/lib.typ"
authors = ["John Doe <john@typst.app>", "Martin <@reknih>"]
license = "MIT OR Apache-2.0"
description = "An example package"
keywords = ["example", "demo"]
categories = ["utility"]
"""


@pytest.fixture
def manifest_toml() -> str:
    """Provide the text of a valid package manifest."""
    return MANIFEST_TOML


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """
    Provide a package project with a manifest.

    Creates:
    - package/typst.toml
    - package/src/lib.typ
    - package/chapters/intro/
    """
    package = tmp_path / "package"
    (package / "src").mkdir(parents=True)
    (package / "src" / "lib.typ").write_text("#let hello = [Hello]\n")
    (package / "chapters" / "intro").mkdir(parents=True)
    (package / "typst.toml").write_text(MANIFEST_TOML)
    return package


@pytest.fixture
def document_dir(tmp_path: Path) -> Path:
    """
    Provide a plain document project without a manifest.

    Creates:
    - document/main.typ
    - document/figures/
    """
    document = tmp_path / "document"
    (document / "figures").mkdir(parents=True)
    (document / "main.typ").write_text("= Hello\n")
    return document


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Provide a nested directory with no markers anywhere in tmp_path."""
    empty = tmp_path / "nothing" / "here"
    empty.mkdir(parents=True)
    return empty
