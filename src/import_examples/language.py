"""
Language detection for example files.

Maps a filename to the language identifier placed on a snippet's opening fence.
The lookup itself is delegated to Pygments' filename patterns.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path

from pygments.lexers import find_lexer_class_for_filename, get_all_lexers

from .config import TEMPLATE_MARKER_SUFFIX
from .errors import LanguageDetectionError


def detection_name(file_path: Path, marker_suffix: str = TEMPLATE_MARKER_SUFFIX) -> Path:
    """Return the name used for detection, with a trailing template marker stripped.

    `config.yaml.example` is detected as `config.yaml`.

    Args:
        file_path: File path relative to its package.
        marker_suffix: Template marker extension, including the leading dot.

    Returns:
        The path to feed to `detect_language`.
    """
    if marker_suffix and file_path.suffix == marker_suffix:
        return file_path.with_suffix("")
    return file_path


def _aliases_for_filename(name: str) -> list[tuple[str, ...]]:
    """Alias tuples of every lexer whose filename patterns match `name`."""
    return [
        tuple(aliases)
        for _name, aliases, patterns, _mimetypes in get_all_lexers()
        if aliases and any(fnmatchcase(name, pattern) for pattern in patterns)
    ]


def detect_language(filename: Path | str) -> str | None:
    """Look up the language identifier for a filename.

    Several lexers can claim the same pattern (`*.sql` is claimed by SQL and
    T-SQL). The lexer that has the bare extension as an alias wins; otherwise
    Pygments' own ranking decides.

    Args:
        filename: File name or path; only the base name is matched.

    Returns:
        The primary alias of the matching Pygments lexer (e.g. `"rust"`), or None.
    """
    name = Path(filename).name
    extension = Path(name).suffix.lstrip(".").lower()

    if extension:
        for aliases in _aliases_for_filename(name):
            if extension in aliases:
                return aliases[0]

    lexer_cls = find_lexer_class_for_filename(name)
    if lexer_cls is None or not lexer_cls.aliases:
        return None
    return lexer_cls.aliases[0]


def language_for(file_path: Path, marker_suffix: str = TEMPLATE_MARKER_SUFFIX) -> str:
    """Detect the language of a package file. There is no fallback language.

    Raises:
        LanguageDetectionError: If no language matches the file name.
    """
    language = detect_language(detection_name(file_path, marker_suffix))
    if language is None:
        raise LanguageDetectionError(f"language detection of {file_path} failed", file_path)
    return language
