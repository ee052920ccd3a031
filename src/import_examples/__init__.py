"""
Import-Examples: Convert example packages into documentation snippets.

This tool walks a directory of example packages and produces one markdown
code-block snippet (`.mdx`) per source file, ready to be included by docs.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
