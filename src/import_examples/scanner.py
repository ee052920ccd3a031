"""
Package scanner module for import-examples.

Discovers example packages (directories holding a manifest) under the examples
root and enumerates the files of each package.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Generator, Iterable

from .config import Config, PackageFile
from .errors import DiscoveryError


def _raise_unreadable(error: OSError) -> None:
    path = error.filename
    raise DiscoveryError(f"Unable to read directory {path}: {error.strerror}", path) from error


def _walk_files(root: Path) -> Generator[Path, None, None]:
    """
    Walk `root` top-down and yield every non-directory entry.

    Symlinked directories are not descended into. Any directory that cannot be
    listed aborts the walk.
    """
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_unreadable):
        current_dir = Path(dirpath)
        for name in filenames:
            yield current_dir / name


def is_excluded(package: Path, excluded_subtrees: Iterable[str]) -> bool:
    """
    Check whether a package lives under an excluded subtree.

    Matching is component-wise: `fullstack-templates/foo` is excluded by
    `fullstack-templates`, `fullstack-templates-extra/foo` is not.
    """
    parts = package.parts
    for subtree in excluded_subtrees:
        prefix = Path(subtree).parts
        if prefix and parts[: len(prefix)] == prefix:
            return True
    return False


def discover_packages(
    examples_dir: Path,
    manifest_name: str,
    excluded_subtrees: Iterable[str] = (),
) -> list[Path]:
    """
    Find every package under the examples root.

    Args:
        examples_dir: Root directory to search
        manifest_name: Filename that marks a package directory
        excluded_subtrees: Package path prefixes to drop

    Returns:
        Package directories relative to `examples_dir`, in traversal order

    Raises:
        DiscoveryError: If a directory cannot be read or a match cannot be
            expressed relative to the root
    """
    excluded = tuple(excluded_subtrees)
    packages = []

    # A missing root has no matches; the caller decides whether that is fatal
    if not examples_dir.is_dir():
        return packages

    matches = [path for path in _walk_files(examples_dir) if path.name == manifest_name]

    for manifest in matches:
        try:
            package = manifest.parent.relative_to(examples_dir)
        except ValueError as e:
            raise DiscoveryError(
                f"{manifest.parent} is not inside {examples_dir}", manifest.parent
            ) from e

        if is_excluded(package, excluded):
            continue

        packages.append(package)

    return packages


def list_package_files(package_dir: Path, ignored_filenames: Iterable[str] = ()) -> list[Path]:
    """
    List every file of a package, recursively.

    Directories and files named exactly like one of `ignored_filenames` are
    skipped. Order follows the filesystem traversal and is not sorted.

    Args:
        package_dir: Absolute (or cwd-relative) package directory
        ignored_filenames: Filenames to skip at any depth

    Returns:
        File paths relative to `package_dir`

    Raises:
        DiscoveryError: If a directory or an entry's metadata cannot be read
    """
    ignored = set(ignored_filenames)
    files = []

    for entry in _walk_files(package_dir):
        try:
            mode = entry.stat().st_mode
        except OSError as e:
            raise DiscoveryError(f"Unable to read metadata of {entry}: {e}", entry) from e

        if stat.S_ISDIR(mode):
            continue

        if entry.name in ignored:
            continue

        try:
            files.append(entry.relative_to(package_dir))
        except ValueError as e:
            raise DiscoveryError(f"{entry} is not inside {package_dir}", entry) from e

    return files


class ExampleScanner:
    """
    Walks the examples root package by package.

    Tracks how many packages and files were seen so the CLI can report them.
    """

    def __init__(self, config: Config):
        """
        Initialize the scanner.

        Args:
            config: Run configuration (root, manifest name, exclusions)
        """
        self.config = config
        self.packages_found = 0
        self.files_seen = 0

    def packages(self) -> list[Path]:
        """Discover packages under the configured root."""
        packages = discover_packages(
            self.config.examples_dir,
            self.config.manifest_name,
            self.config.excluded_subtrees,
        )
        self.packages_found = len(packages)
        return packages

    def scan(self) -> Generator[PackageFile, None, None]:
        """
        Yield every package file, package by package.

        Files of a package are enumerated only when that package is reached.
        """
        for package in self.packages():
            package_dir = self.config.examples_dir / package
            for file_path in list_package_files(package_dir, self.config.ignored_filenames):
                self.files_seen += 1
                yield PackageFile(
                    package=package,
                    path=file_path,
                    examples_dir=self.config.examples_dir,
                )
