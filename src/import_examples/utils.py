"""
Utility functions for import-examples.

Text I/O helpers that keep file contents byte-for-byte intact.
"""

from __future__ import annotations

from pathlib import Path


def read_text_exact(file_path: Path) -> str:
    """Read a file as strict UTF-8 without newline translation.

    `\\r\\n` line endings survive the read, so a snippet body matches the source
    file exactly.

    Args:
        file_path: Path to the file to read.

    Returns:
        The full file contents.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(file_path, encoding="utf-8", errors="strict", newline="") as f:
        return f.read()


def write_text_exact(file_path: Path, content: str) -> None:
    """Create or truncate a file and write `content` in one pass.

    No newline translation is applied and no temporary file is used.

    Raises:
        OSError: If the file cannot be created or written.
    """
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
