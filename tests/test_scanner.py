"""Tests for the scanner module."""

import os
from pathlib import Path

import pytest

from import_examples.config import Config
from import_examples.errors import DiscoveryError
from import_examples.scanner import (
    ExampleScanner,
    discover_packages,
    is_excluded,
    list_package_files,
)


requires_permissions = pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="directory permissions are not enforced for this user",
)


@pytest.fixture
def lock_dir():
    """Remove all permissions from a directory, restoring them afterwards."""
    locked = []

    def _lock(path: Path) -> Path:
        path.chmod(0)
        locked.append(path)
        return path

    yield _lock

    for path in locked:
        path.chmod(0o755)


class TestIsExcluded:
    """Tests for is_excluded."""

    def test_excluded_subtree(self):
        """Test that packages under the subtree are excluded."""
        assert is_excluded(Path("fullstack-templates/saas"), ["fullstack-templates"])
        assert is_excluded(Path("fullstack-templates"), ["fullstack-templates"])

    def test_prefix_is_component_wise(self):
        """Test that a longer directory name sharing the prefix is kept."""
        assert not is_excluded(Path("fullstack-templates-old/saas"), ["fullstack-templates"])
        assert not is_excluded(Path("axum/fullstack-templates"), ["fullstack-templates"])

    def test_no_exclusions(self):
        """Test with an empty denylist."""
        assert not is_excluded(Path("fullstack-templates/saas"), [])


class TestDiscoverPackages:
    """Tests for discover_packages."""

    def test_finds_packages(self, examples_root):
        """Test that every manifest directory is found, relative to the root."""
        packages = discover_packages(examples_root, "Cargo.toml")

        assert set(packages) == {
            Path("pkgA"),
            Path("axum/hello"),
            Path("fullstack-templates/saas"),
        }

    def test_excludes_denylisted_subtree(self, examples_root):
        """Test that the excluded subtree never shows up."""
        packages = discover_packages(examples_root, "Cargo.toml", ["fullstack-templates"])

        assert set(packages) == {Path("pkgA"), Path("axum/hello")}
        for package in packages:
            assert package.parts[0] != "fullstack-templates"

    def test_excludes_deeply_nested_packages(self, examples_root):
        """Test that packages nested below an excluded package are also dropped."""
        nested = examples_root / "fullstack-templates" / "saas" / "inner"
        nested.mkdir()
        (nested / "Cargo.toml").write_text("[package]\n")

        packages = discover_packages(examples_root, "Cargo.toml", ["fullstack-templates"])

        assert Path("fullstack-templates/saas/inner") not in packages

    def test_directory_without_manifest(self, examples_root):
        """Test that directories without a manifest are not packages."""
        packages = discover_packages(examples_root, "Cargo.toml")

        assert Path("notes") not in packages

    def test_missing_root_yields_nothing(self, tmp_path):
        """Test that discovery over a missing root finds no packages."""
        assert discover_packages(tmp_path / "missing", "Cargo.toml") == []

    def test_no_duplicates(self, examples_root):
        """Test that each package is reported once."""
        packages = discover_packages(examples_root, "Cargo.toml")

        assert len(packages) == len(set(packages))

    def test_root_package(self, tmp_path):
        """Test that a manifest at the root makes the root itself a package."""
        (tmp_path / "Cargo.toml").write_text("[package]\n")

        assert discover_packages(tmp_path, "Cargo.toml") == [Path(".")]

    @requires_permissions
    def test_unreadable_subtree_is_fatal(self, examples_root, lock_dir):
        """Test that a directory that cannot be listed aborts discovery."""
        locked = examples_root / "locked"
        (locked / "pkg").mkdir(parents=True)
        (locked / "pkg" / "Cargo.toml").write_text("[package]\n")
        lock_dir(locked)

        with pytest.raises(DiscoveryError) as exc_info:
            discover_packages(examples_root, "Cargo.toml")

        assert "locked" in str(exc_info.value)


class TestListPackageFiles:
    """Tests for list_package_files."""

    def test_lists_files_recursively(self, examples_root):
        """Test that nested files are listed relative to the package."""
        files = list_package_files(examples_root / "pkgA")

        assert set(files) == {Path("Cargo.toml"), Path("src/main.rs"), Path(".gitignore")}

    def test_skips_directories(self, examples_root):
        """Test that directories are never returned."""
        files = list_package_files(examples_root / "axum" / "hello")

        assert Path("src") not in files

    def test_skips_ignored_filenames_at_any_depth(self, examples_root):
        """Test that ignore-listed dotfiles are dropped wherever they are."""
        files = list_package_files(
            examples_root / "axum" / "hello",
            [".gitignore", ".ignore"],
        )
        names = {f.name for f in files}

        assert ".ignore" not in names
        assert ".gitignore" not in names
        assert set(files) == {
            Path("Cargo.toml"),
            Path("config.yaml.example"),
            Path("src/lib.rs"),
        }

    def test_ignore_list_is_exact(self, examples_root):
        """Test that names merely containing an ignored name are kept."""
        (examples_root / "pkgA" / "my.gitignore").write_text("x\n")

        files = list_package_files(examples_root / "pkgA", [".gitignore", ".ignore"])

        assert Path("my.gitignore") in files

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_broken_entry_is_fatal(self, examples_root):
        """Test that an entry whose metadata cannot be read aborts enumeration."""
        (examples_root / "pkgA" / "dangling.rs").symlink_to(examples_root / "nowhere.rs")

        with pytest.raises(DiscoveryError) as exc_info:
            list_package_files(examples_root / "pkgA")

        assert "dangling.rs" in str(exc_info.value)

    @requires_permissions
    def test_unreadable_subdirectory_is_fatal(self, examples_root, lock_dir):
        """Test that a package subdirectory that cannot be listed aborts enumeration."""
        secret = examples_root / "pkgA" / "secret"
        secret.mkdir()
        (secret / "a.rs").write_text("fn a() {}")
        lock_dir(secret)

        with pytest.raises(DiscoveryError) as exc_info:
            list_package_files(examples_root / "pkgA")

        assert "secret" in str(exc_info.value)


class TestExampleScanner:
    """Tests for ExampleScanner."""

    def test_scan_yields_package_files(self, examples_root, snippets_dir):
        """Test that scanning flattens packages into package files."""
        scanner = ExampleScanner(Config(examples_dir=examples_root, output_dir=snippets_dir))
        identities = {f.identity for f in scanner.scan()}

        assert identities == {
            "pkgA/Cargo.toml",
            "pkgA/src/main.rs",
            "axum/hello/Cargo.toml",
            "axum/hello/src/lib.rs",
            "axum/hello/config.yaml.example",
        }

    def test_scan_statistics(self, examples_root, snippets_dir):
        """Test that package and file counts are collected."""
        scanner = ExampleScanner(Config(examples_dir=examples_root, output_dir=snippets_dir))
        files = list(scanner.scan())

        assert scanner.packages_found == 2
        assert scanner.files_seen == len(files) == 5

    def test_package_file_paths(self, examples_root, snippets_dir):
        """Test that absolute paths point at the real file."""
        scanner = ExampleScanner(Config(examples_dir=examples_root, output_dir=snippets_dir))

        for package_file in scanner.scan():
            assert package_file.absolute_path.is_file()
