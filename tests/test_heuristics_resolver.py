"""
Tests for project root resolution.

Tests cover:
- Matching heuristics in a single directory
- Entrypoints inside a src/ folder
- Walking ancestors, including relative paths
- Nested projects and heuristic selection
- Filesystem errors
"""

from pathlib import Path

import pytest

from typst_project.core.heuristics import (
    RECOMMENDED,
    Heuristics,
    all_heuristics,
    is_project_root,
    project_root,
    root_files,
    try_find_project_root,
)


class TestProjectRoot:
    """Tests for project_root on a single directory."""

    def test_manifest_only_with_recommended(self, package_dir: Path) -> None:
        """Test that src/lib.typ is ignored unless SRC_FOLDER is wanted."""
        matched = project_root(package_dir, RECOMMENDED, first=False)
        assert matched == Heuristics.MANIFEST_FILE

    def test_all_heuristics_without_first(self, package_dir: Path) -> None:
        matched = project_root(package_dir, all_heuristics(), first=False)
        assert matched == Heuristics.MANIFEST_FILE | Heuristics.LIB_FILE | Heuristics.SRC_FOLDER

    def test_first_stops_after_one_match(self, tmp_path: Path) -> None:
        (tmp_path / "typst.toml").write_text("")
        (tmp_path / "main.typ").write_text("")

        matched = project_root(tmp_path, RECOMMENDED, first=True)
        assert matched in (Heuristics.MANIFEST_FILE, Heuristics.MAIN_FILE)

    def test_matches_only_wanted_heuristics(self, tmp_path: Path) -> None:
        (tmp_path / "typst.toml").write_text("")
        (tmp_path / "main.typ").write_text("")

        matched = project_root(tmp_path, Heuristics.MAIN_FILE, first=False)
        assert matched == Heuristics.MAIN_FILE

    def test_no_match(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("")
        assert project_root(tmp_path, all_heuristics()).is_empty()

    def test_directory_named_like_marker(self, tmp_path: Path) -> None:
        """Test that only regular files count as markers."""
        (tmp_path / "main.typ").mkdir()
        assert project_root(tmp_path, RECOMMENDED).is_empty()

    def test_symlinked_marker_is_ignored(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        target.mkdir()
        (target / "main.typ").write_text("")
        project = tmp_path / "project"
        project.mkdir()
        (project / "main.typ").symlink_to(target / "main.typ")

        assert project_root(project, RECOMMENDED).is_empty()

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            project_root(tmp_path / "missing", RECOMMENDED)


class TestSrcFolder:
    """Tests for entrypoints inside src/."""

    def test_main_in_src(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.typ").write_text("")

        matched = project_root(tmp_path, all_heuristics())
        assert matched == Heuristics.MAIN_FILE | Heuristics.SRC_FOLDER

    def test_src_needs_the_entrypoint_bit_too(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.typ").write_text("")

        assert project_root(tmp_path, Heuristics.SRC_FOLDER | Heuristics.LIB_FILE).is_empty()
        assert project_root(tmp_path, Heuristics.SRC_FOLDER | Heuristics.MAIN_FILE)

    def test_src_without_folder_heuristic(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "lib.typ").write_text("")

        assert project_root(tmp_path, RECOMMENDED).is_empty()

    def test_non_file_in_src_ends_lookup(self, tmp_path: Path) -> None:
        """Test that a directory inside src/ stops the src/ lookup."""
        (tmp_path / "src" / "lib.typ").mkdir(parents=True)
        assert project_root(tmp_path, all_heuristics()).is_empty()

    def test_src_file_is_not_a_folder(self, tmp_path: Path) -> None:
        (tmp_path / "src").write_text("")
        assert project_root(tmp_path, all_heuristics()).is_empty()

    def test_only_direct_children_of_src(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "nested").mkdir(parents=True)
        (tmp_path / "src" / "nested" / "main.typ").write_text("")

        assert project_root(tmp_path, all_heuristics()).is_empty()


class TestIsProjectRoot:
    """Tests for is_project_root."""

    def test_package_root(self, package_dir: Path) -> None:
        assert is_project_root(package_dir, RECOMMENDED)

    def test_subdirectory(self, package_dir: Path) -> None:
        assert not is_project_root(package_dir / "chapters", RECOMMENDED)

    def test_empty_heuristics_never_match(self, package_dir: Path) -> None:
        assert not is_project_root(package_dir, Heuristics.empty())


class TestTryFindProjectRoot:
    """Tests for try_find_project_root."""

    def test_finds_from_root(self, package_dir: Path) -> None:
        assert try_find_project_root(package_dir, RECOMMENDED) == (
            package_dir,
            Heuristics.MANIFEST_FILE,
        )

    def test_finds_from_nested_directory(self, package_dir: Path) -> None:
        found = try_find_project_root(package_dir / "chapters" / "intro", RECOMMENDED)
        assert found == (package_dir, Heuristics.MANIFEST_FILE)

    def test_returns_none_without_markers(self, empty_dir: Path) -> None:
        assert try_find_project_root(empty_dir, Heuristics.MANIFEST_FILE) is None

    def test_nearest_root_wins(self, document_dir: Path) -> None:
        """Test that a nested package is found before the outer document."""
        inner = document_dir / "figures" / "diagram"
        inner.mkdir()
        (inner / "typst.toml").write_text("")

        found = try_find_project_root(inner, RECOMMENDED)
        assert found == (inner, Heuristics.MANIFEST_FILE)

    def test_heuristics_select_the_root(self, document_dir: Path) -> None:
        inner = document_dir / "figures" / "diagram"
        inner.mkdir()
        (inner / "typst.toml").write_text("")

        found = try_find_project_root(inner, Heuristics.MAIN_FILE)
        assert found == (document_dir, Heuristics.MAIN_FILE)

    def test_partial_match_ends_walk(self, tmp_path: Path) -> None:
        """Test that a root only needs one of the wanted heuristics."""
        (tmp_path / "typst.toml").write_text("")
        child = tmp_path / "child"
        child.mkdir()
        (child / "main.typ").write_text("")

        found = try_find_project_root(child, RECOMMENDED, first=False)
        assert found == (child, Heuristics.MAIN_FILE)

    def test_without_first_reports_every_match(self, package_dir: Path) -> None:
        found = try_find_project_root(package_dir / "chapters", all_heuristics(), first=False)
        assert found == (
            package_dir,
            Heuristics.MANIFEST_FILE | Heuristics.LIB_FILE | Heuristics.SRC_FOLDER,
        )

    def test_accepts_str_path(self, package_dir: Path) -> None:
        found = try_find_project_root(str(package_dir / "chapters"), RECOMMENDED)
        assert found is not None
        assert found[0] == package_dir

    def test_relative_path_walks_its_own_ancestors(
        self, package_dir: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(package_dir.parent)

        found = try_find_project_root(Path("package/chapters/intro"), RECOMMENDED)
        assert found == (Path("package"), Heuristics.MANIFEST_FILE)

    def test_relative_path_is_not_resolved(self, package_dir: Path, monkeypatch) -> None:
        """Test that a root above the relative prefix is not found."""
        monkeypatch.chdir(package_dir / "chapters")

        assert try_find_project_root(Path("intro"), RECOMMENDED) is None

    def test_relative_dot_is_inspected(self, package_dir: Path, monkeypatch) -> None:
        monkeypatch.chdir(package_dir)

        found = try_find_project_root(Path("chapters/intro"), RECOMMENDED)
        assert found == (Path("."), Heuristics.MANIFEST_FILE)

    def test_missing_start_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            try_find_project_root(tmp_path / "missing" / "dir", RECOMMENDED)


class TestTypstfmtMarker:
    """Tests for the optional typstfmt.toml marker."""

    def test_ignored_by_default(self, tmp_path: Path) -> None:
        (tmp_path / "typstfmt.toml").write_text("")
        assert project_root(tmp_path, all_heuristics()).is_empty()

    def test_enabled_by_env(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("TYPST_PROJECT_HEURISTICS_TYPSTFMT", "1")
        root_files.cache_clear()
        (tmp_path / "typstfmt.toml").write_text("")

        matched = project_root(tmp_path, all_heuristics())
        assert matched == Heuristics.TYPSTFMT_CONFIG

    def test_enabled_by_user_config(self, tmp_path: Path, user_config_dir: Path) -> None:
        (user_config_dir / "config.json").write_text('{"heuristics": {"typstfmt": true}}')
        root_files.cache_clear()
        project = tmp_path / "project"
        project.mkdir()
        (project / "typstfmt.toml").write_text("")

        assert is_project_root(project, Heuristics.TYPSTFMT_CONFIG)
