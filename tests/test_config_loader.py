"""
Unit tests for configuration loader.

Tests multi-layer config merging, environment variable overrides,
caching, XDG directory handling, and layered .env loading.
"""

import json
import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from typst_project.core.config import (
    TypstProjectConfig,
    clear_cache,
    get_user_config_path,
    load_config,
    load_layered_env,
)
from typst_project.core.config.loader import (
    apply_env_overrides,
    get_default_config,
    get_xdg_config_home,
    merge_layers,
    read_config_file,
)

# ==============================================================================
# Helper Functions Tests
# ==============================================================================


class TestMergeLayers:
    """Test the merge_layers helper function."""

    def test_simple_merge(self):
        result = merge_layers({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self):
        """Test merging nested dicts."""
        base = {"heuristics": {"typstfmt": False, "x": 1}}
        override = {"heuristics": {"typstfmt": True}}
        result = merge_layers(base, override)
        assert result == {"heuristics": {"typstfmt": True, "x": 1}}

    def test_base_is_not_mutated(self):
        base = {"a": {"b": 1}}
        merge_layers(base, {"a": {"c": 2}})
        assert base == {"a": {"b": 1}}


class TestReadConfigFile:
    """Test read_config_file."""

    def test_load_existing_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"heuristics": {"typstfmt": True}}))
        assert read_config_file(path) == {"heuristics": {"typstfmt": True}}

    def test_load_nonexistent_file(self, tmp_path):
        assert read_config_file(tmp_path / "missing.json") is None

    def test_load_invalid_json(self, tmp_path, caplog):
        """Test that invalid JSON is logged and ignored."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert read_config_file(path) is None
        assert "Ignoring unreadable config" in caplog.text

    def test_load_non_object(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        assert read_config_file(path) is None
        assert "not an object" in caplog.text


class TestApplyEnvOverrides:
    """Test environment variable overrides."""

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
    def test_typstfmt_true(self, monkeypatch, raw):
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", raw)
        result = apply_env_overrides(get_default_config())
        assert result["heuristics"]["typstfmt"] is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", ""])
    def test_typstfmt_false(self, monkeypatch, raw):
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", raw)
        result = apply_env_overrides({"heuristics": {"typstfmt": True}})
        assert result["heuristics"]["typstfmt"] is False

    def test_typstfmt_invalid(self, monkeypatch, caplog):
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", "maybe")
        result = apply_env_overrides({"heuristics": {"typstfmt": True}})

        assert result["heuristics"]["typstfmt"] is True
        assert "Invalid TYPST_PROJECT_HEURISTICS_TYPSTFMT" in caplog.text

    def test_no_env_overrides(self):
        config = get_default_config()
        assert apply_env_overrides(config) == config


class TestXdgDirectories:
    """Test XDG directory helpers."""

    def test_get_xdg_config_home_default(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert get_xdg_config_home() == Path.home() / ".config"

    def test_get_xdg_config_home_custom(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_xdg_config_home() == tmp_path

    def test_get_user_config_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_config_path() == tmp_path / "typst-project" / "config.json"


# ==============================================================================
# load_config Tests
# ==============================================================================


class TestLoadConfig:
    """Test the full config loading chain."""

    def test_defaults_only(self):
        config = load_config()
        assert isinstance(config, TypstProjectConfig)
        assert config.heuristics.typstfmt is False

    def test_user_config_overrides_defaults(self, user_config_dir):
        (user_config_dir / "config.json").write_text('{"heuristics": {"typstfmt": true}}')
        assert load_config().heuristics.typstfmt is True

    def test_env_overrides_user_config(self, user_config_dir, monkeypatch):
        (user_config_dir / "config.json").write_text('{"heuristics": {"typstfmt": true}}')
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", "0")
        assert load_config().heuristics.typstfmt is False

    def test_unknown_top_level_keys_are_ignored(self, user_config_dir):
        (user_config_dir / "config.json").write_text('{"theme": "dark"}')
        assert load_config().heuristics.typstfmt is False

    def test_unknown_heuristics_key_is_rejected(self, user_config_dir):
        (user_config_dir / "config.json").write_text('{"heuristics": {"cargo": true}}')
        with pytest.raises(ValidationError):
            load_config()

    def test_caching(self, monkeypatch):
        first = load_config()
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", "1")

        assert load_config() is first
        assert load_config(use_cache=False).heuristics.typstfmt is True

    def test_clear_cache(self, monkeypatch):
        load_config()
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", "1")
        clear_cache()

        assert load_config().heuristics.typstfmt is True


# ==============================================================================
# Layered .env Tests
# ==============================================================================


class TestLoadLayeredEnv:
    """Test load_layered_env precedence."""

    KEY = "TYPST_PROJECT_TEST_VALUE"

    @pytest.fixture(autouse=True)
    def _restore_key(self, monkeypatch):
        # Registers the key with monkeypatch so values written by the loader are undone
        monkeypatch.setenv(self.KEY, "")
        monkeypatch.delenv(self.KEY)

    def test_user_env(self, tmp_path):
        user_env = tmp_path / "user.env"
        user_env.write_text(f"{self.KEY}=user\n")

        load_layered_env(user_env_paths=[user_env], local_env_paths=[])
        assert os.environ[self.KEY] == "user"

    def test_local_env_overrides_user_env(self, tmp_path):
        user_env = tmp_path / "user.env"
        user_env.write_text(f"{self.KEY}=user\n")
        local_env = tmp_path / ".env"
        local_env.write_text(f"{self.KEY}=local\n")

        load_layered_env(user_env_paths=[user_env], local_env_paths=[local_env])
        assert os.environ[self.KEY] == "local"

    def test_os_env_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(self.KEY, "os")
        local_env = tmp_path / ".env"
        local_env.write_text(f"{self.KEY}=local\n")

        load_layered_env(user_env_paths=[], local_env_paths=[local_env])
        assert os.environ[self.KEY] == "os"

    def test_default_paths(self, tmp_path, isolated_config):
        user_dir = isolated_config / "typst-project"
        user_dir.mkdir(parents=True, exist_ok=True)
        (user_dir / ".env").write_text(f"{self.KEY}=user\n")

        load_layered_env(cwd=tmp_path)
        assert os.environ[self.KEY] == "user"

    def test_missing_files_are_skipped(self, tmp_path):
        load_layered_env(
            user_env_paths=[tmp_path / "nope.env"],
            local_env_paths=[tmp_path / "missing.env"],
        )
        assert self.KEY not in os.environ

    def test_keys_without_values_are_skipped(self, tmp_path):
        local_env = tmp_path / ".env"
        local_env.write_text(f"{self.KEY}\n")

        load_layered_env(user_env_paths=[], local_env_paths=[local_env])
        assert self.KEY not in os.environ
