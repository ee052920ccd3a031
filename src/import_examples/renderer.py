"""
Snippet rendering and writing for import-examples.

Turns a package file into a fenced markdown code block and writes it into the
flat snippets directory.
"""

from __future__ import annotations

from pathlib import Path

from slugify import slugify

from .config import SNIPPET_EXTENSION, Config, PackageFile, Snippet
from .errors import ReadError, WriteError
from .language import language_for
from .utils import read_text_exact, write_text_exact


def slugify_snippet_name(identity: str, extension: str = SNIPPET_EXTENSION) -> str:
    """
    Build the snippet filename for a `<package>/<file>` identity string.

    Distinct identities can produce the same name (`a_b.rs` and `a-b.rs`);
    the later write wins.
    """
    return slugify(identity) + extension


def render_snippet(language: str, label: str, contents: str) -> str:
    """
    Wrap file contents in a fenced code block.

    Contents are inserted verbatim. A fence inside `contents` is not escaped.
    """
    return f"```{language} {label}\n{contents}\n```\n"


def generate_snippet(package_file: PackageFile, config: Config) -> Snippet:
    """
    Produce the snippet for one package file.

    Args:
        package_file: File to convert
        config: Run configuration (marker suffix, snippet extension)

    Returns:
        The rendered snippet and its target filename

    Raises:
        LanguageDetectionError: If the file's language is unknown
        ReadError: If the file cannot be read as UTF-8 text
    """
    identity = package_file.identity
    filename = slugify_snippet_name(identity, config.snippet_extension)
    language = language_for(package_file.path, config.marker_suffix)

    source_path = package_file.absolute_path
    try:
        contents = read_text_exact(source_path)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Unable to read {source_path}: {e}", source_path) from e

    return Snippet(
        filename=filename,
        language=language,
        label=identity,
        content=render_snippet(language, identity, contents),
    )


def ensure_output_dir(output_dir: Path) -> None:
    """
    Create the snippets directory if it does not exist.

    Creation is not recursive: a missing parent directory is an error.
    """
    if output_dir.exists():
        return
    try:
        output_dir.mkdir()
    except OSError as e:
        raise WriteError(f"Unable to create {output_dir}: {e}", output_dir) from e


def write_snippet(path: Path, content: str) -> None:
    """Write a snippet, silently replacing any existing file at `path`."""
    try:
        write_text_exact(path, content)
    except OSError as e:
        raise WriteError(f"Unable to write {path}: {e}", path) from e
