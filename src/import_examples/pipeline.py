"""
Conversion pipeline for import-examples.

Discovery feeds enumeration feeds generation feeds writing, strictly in order,
one package and one file at a time.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from .config import Config, MissingRootPolicy, RunStats, Snippet
from .errors import MissingRootError, SnippetError
from .renderer import ensure_output_dir, generate_snippet, write_snippet
from .scanner import ExampleScanner


def check_examples_dir(config: Config) -> bool:
    """Return whether the examples root exists.

    Under `MissingRootPolicy.WARN` a missing root is only reported back to the
    caller and the run goes on; discovery then finds nothing.

    Raises:
        MissingRootError: If the root is missing and the policy is `HALT`.
    """
    if config.examples_dir.exists():
        return True
    if config.missing_root_policy is MissingRootPolicy.HALT:
        raise MissingRootError(f"{config.examples_dir} does not exist", config.examples_dir)
    return False


def run(
    config: Config,
    on_write: Callable[[Snippet], None] | None = None,
) -> RunStats:
    """Convert every example file under the root into a snippet.

    By default the first error propagates and ends the run. With
    `config.keep_going`, generation and write failures are collected in
    `RunStats.failures` and the remaining files are still processed. Discovery
    and output-directory failures always propagate.

    Args:
        config: Run configuration.
        on_write: Optional callback invoked after each snippet is written.

    Returns:
        Statistics for the run.
    """
    start_time = time.time()
    stats = RunStats()

    ensure_output_dir(config.output_dir)

    scanner = ExampleScanner(config)
    for package_file in scanner.scan():
        try:
            snippet = generate_snippet(package_file, config)
            write_snippet(config.output_dir / snippet.filename, snippet.content)
        except SnippetError as e:
            if not config.keep_going:
                raise
            stats.failures.append(e)
            continue

        stats.snippets_written += 1
        stats.written.append(snippet.filename)
        if on_write is not None:
            on_write(snippet)

    stats.packages_found = scanner.packages_found
    stats.files_seen = scanner.files_seen
    stats.processing_time_seconds = time.time() - start_time
    return stats
