"""
Error types for import-examples.

Each pipeline stage raises its own error kind so the caller can decide whether
to abort on the first failure or collect them.
"""

from __future__ import annotations

from pathlib import Path


class SnippetError(Exception):
    """Base class for every failure while converting examples."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class MissingRootError(SnippetError):
    """The examples directory does not exist and the run was told to halt."""

    pass


class DiscoveryError(SnippetError):
    """A package or package file could not be resolved on disk."""

    pass


class LanguageDetectionError(SnippetError):
    """No language is known for a file name."""

    pass


class ReadError(SnippetError):
    """An example file could not be read as UTF-8 text."""

    pass


class WriteError(SnippetError):
    """The snippets directory or a snippet file could not be written."""

    pass
