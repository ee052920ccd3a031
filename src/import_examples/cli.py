"""
CLI entry point for import-examples.

Provides a command-line interface for converting example packages into
documentation snippets.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config, MissingRootPolicy, Snippet, default_output_dir
from .errors import SnippetError
from .pipeline import check_examples_dir, run

# Initialize CLI app
app = typer.Typer(
    name="import-examples",
    help="Convert example packages into markdown snippets for documentation.",
    add_completion=False,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"import-examples version {__version__}")
        raise typer.Exit()


@app.command()
def convert(
    examples_dir: Path = typer.Argument(
        ...,
        help="Path to the examples directory.",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir", "-o",
        help="Directory for generated snippets (default: ../_snippets relative to the working directory).",
    ),
    halt_on_missing_root: bool = typer.Option(
        False,
        "--halt-on-missing-root",
        help="Exit with an error when EXAMPLES_DIR does not exist instead of warning and continuing.",
    ),
    keep_going: bool = typer.Option(
        False,
        "--keep-going", "-k",
        help="Report every failing file at the end instead of stopping at the first.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print each snippet as it is written.",
    ),
    version: bool = typer.Option(
        False,
        "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    Write one .mdx snippet per file of every example package.

    A package is any directory under EXAMPLES_DIR holding a Cargo.toml.

    Examples:

        # Convert into ../_snippets
        import-examples ./examples

        # Convert into an explicit directory, listing every snippet
        import-examples ./examples -o ./docs/_snippets --verbose
    """
    config = Config(
        examples_dir=examples_dir,
        output_dir=output_dir if output_dir is not None else default_output_dir(),
        missing_root_policy=(
            MissingRootPolicy.HALT if halt_on_missing_root else MissingRootPolicy.WARN
        ),
        keep_going=keep_going,
    )

    def report(snippet: Snippet) -> None:
        console.print(
            f"[dim]{escape(snippet.label)} -> {escape(snippet.filename)} ({snippet.language})[/dim]"
        )

    try:
        # A missing root is only a warning by default; discovery still runs
        if not check_examples_dir(config):
            err_console.print(f"[yellow]{escape(str(examples_dir))} does not exist[/yellow]")

        stats = run(config, on_write=report if verbose else None)

    except SnippetError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if stats.failures:
        for failure in stats.failures:
            err_console.print(f"[red]Error: {escape(str(failure))}[/red]")
        err_console.print(
            f"[red]{len(stats.failures)} of {stats.files_seen} files failed[/red]"
        )
        raise typer.Exit(1)

    console.print(
        f"[green]Wrote {stats.snippets_written} snippets from {stats.packages_found} packages "
        f"to {escape(str(config.output_dir))} in {stats.processing_time_seconds:.2f}s[/green]"
    )
    if stats.unique_snippets < stats.snippets_written:
        console.print(
            f"[yellow]Warning: {stats.snippets_written - stats.unique_snippets} snippets "
            f"overwrote another with the same name[/yellow]"
        )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
