"""Shared fixtures for import-examples tests."""

from pathlib import Path

import pytest


@pytest.fixture
def examples_root(tmp_path: Path) -> Path:
    """Create a temporary examples tree with a few packages."""
    root = tmp_path / "examples"

    # A plain package
    (root / "pkgA" / "src").mkdir(parents=True)
    (root / "pkgA" / "Cargo.toml").write_text('[package]\nname = "pkg-a"\n')
    (root / "pkgA" / "src" / "main.rs").write_text("fn main() {}")
    (root / "pkgA" / ".gitignore").write_text("target/\n")

    # A nested package with a template file
    (root / "axum" / "hello" / "src").mkdir(parents=True)
    (root / "axum" / "hello" / "Cargo.toml").write_text('[package]\nname = "hello"\n')
    (root / "axum" / "hello" / "src" / "lib.rs").write_text("pub fn hello() {}\n")
    (root / "axum" / "hello" / "config.yaml.example").write_text("port: 8000\n")
    (root / "axum" / "hello" / "src" / ".ignore").write_text("*.log\n")

    # An excluded subtree
    (root / "fullstack-templates" / "saas" / "src").mkdir(parents=True)
    (root / "fullstack-templates" / "saas" / "Cargo.toml").write_text("[package]\n")
    (root / "fullstack-templates" / "saas" / "src" / "main.rs").write_text("fn main() {}")

    # A directory without a manifest is not a package
    (root / "notes").mkdir()
    (root / "notes" / "README.md").write_text("# Notes\n")

    return root


@pytest.fixture
def snippets_dir(tmp_path: Path) -> Path:
    """Output directory path (not created)."""
    return tmp_path / "_snippets"
