"""
Configuration models and defaults for import-examples.

Everything is driven by CLI options; there is no configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from import_examples.errors import SnippetError

# A directory holding this file is an example package
MANIFEST_FILENAME = "Cargo.toml"

# Package subtrees that are never turned into snippets
EXCLUDED_SUBTREES: tuple[str, ...] = ("fullstack-templates",)

# Files skipped inside every package, at any depth
IGNORED_FILENAMES: tuple[str, ...] = (".gitignore", ".ignore")

# Appended to a real extension to mark a non-runnable template (e.g. `.env.example`)
TEMPLATE_MARKER_SUFFIX = ".example"

SNIPPET_EXTENSION = ".mdx"
DEFAULT_SNIPPETS_DIRNAME = "_snippets"


class MissingRootPolicy(str, Enum):
    """What to do when the examples directory does not exist."""

    WARN = "warn"
    HALT = "halt"


def default_output_dir(cwd: Path | None = None) -> Path:
    """Return the historical snippets location, `../_snippets` relative to `cwd`.

    Args:
        cwd: Base directory. Defaults to the process working directory.

    Returns:
        Path to the snippets directory (not created).
    """
    base = cwd if cwd is not None else Path.cwd()
    return base / ".." / DEFAULT_SNIPPETS_DIRNAME


@dataclass
class Config:
    """Main configuration for `import-examples`.

    Attributes:
        examples_dir: Root directory containing example packages.
        output_dir: Flat directory the snippets are written into.
        manifest_name: Filename that marks a directory as a package.
        excluded_subtrees: Package path prefixes to skip.
        ignored_filenames: Exact filenames never turned into snippets.
        marker_suffix: Template suffix stripped before language detection.
        snippet_extension: Extension appended to every snippet slug.
        missing_root_policy: Whether a missing `examples_dir` warns or halts.
        keep_going: Collect per-file failures instead of aborting on the first.
    """

    examples_dir: Path
    output_dir: Path = field(default_factory=default_output_dir)

    # Discovery options
    manifest_name: str = MANIFEST_FILENAME
    excluded_subtrees: tuple[str, ...] = EXCLUDED_SUBTREES
    ignored_filenames: tuple[str, ...] = IGNORED_FILENAMES

    # Generation options
    marker_suffix: str = TEMPLATE_MARKER_SUFFIX
    snippet_extension: str = SNIPPET_EXTENSION

    # Failure handling
    missing_root_policy: MissingRootPolicy = MissingRootPolicy.WARN
    keep_going: bool = False

    def __post_init__(self) -> None:
        """Normalize paths and suffixes."""
        self.examples_dir = Path(self.examples_dir)
        self.output_dir = Path(self.output_dir)
        self.missing_root_policy = MissingRootPolicy(self.missing_root_policy)

        if self.marker_suffix and not self.marker_suffix.startswith("."):
            self.marker_suffix = f".{self.marker_suffix}"
        if self.snippet_extension and not self.snippet_extension.startswith("."):
            self.snippet_extension = f".{self.snippet_extension}"


@dataclass
class PackageFile:
    """A single example file inside a package.

    Attributes:
        package: Package directory relative to the examples root.
        path: File path relative to the package directory.
        examples_dir: Examples root the package was discovered under.
    """

    package: Path
    path: Path
    examples_dir: Path

    @property
    def identity(self) -> str:
        """Canonical `<package>/<file>` string, used as slug source and display label.

        A package at the examples root itself contributes no prefix.
        """
        if self.package == Path("."):
            return self.path.as_posix()
        return f"{self.package.as_posix()}/{self.path.as_posix()}"

    @property
    def package_dir(self) -> Path:
        return self.examples_dir / self.package

    @property
    def absolute_path(self) -> Path:
        return self.package_dir / self.path


@dataclass
class Snippet:
    """A rendered snippet ready to be written.

    Attributes:
        filename: Output filename (slug plus extension), without directory.
        language: Detected language identifier used on the opening fence.
        label: Display label shown after the language.
        content: Full rendered markdown.
    """

    filename: str
    language: str
    label: str
    content: str


@dataclass
class RunStats:
    """Statistics from one conversion run.

    Attributes:
        packages_found: Packages left after exclusion.
        files_seen: Package files handed to generation.
        snippets_written: Successful snippet writes (overwrites included).
        written: Snippet filenames in write order.
        failures: Errors collected when running with `keep_going`.
        processing_time_seconds: End-to-end processing time.
    """

    packages_found: int = 0
    files_seen: int = 0
    snippets_written: int = 0
    written: list[str] = field(default_factory=list)
    failures: list[SnippetError] = field(default_factory=list)
    processing_time_seconds: float = 0.0

    @property
    def unique_snippets(self) -> int:
        """Number of distinct snippet files left on disk after slug collisions."""
        return len(set(self.written))
