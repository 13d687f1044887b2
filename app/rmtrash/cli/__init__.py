"""CLI package for rmtrash.

This package contains the Typer application and the terminal prompt.
"""

from rmtrash.cli.main import app

__all__ = ["app"]
