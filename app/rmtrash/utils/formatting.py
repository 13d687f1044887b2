"""Rich console formatting utilities.

Provides consistent formatting for rmtrash output. Diagnostics go to
stderr in the ``rmtrash: ...`` form used by coreutils; verbose lines go
to stdout.
"""

import sys

from rich.console import Console
from rich.markup import escape

from rmtrash.core.theme import get_theme

PROG_NAME = "rmtrash"


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system(), highlight=False)
err_console = Console(
    theme=get_theme(), stderr=True, color_system=_detect_color_system(), highlight=False
)


def print_removed(line: str) -> None:
    """Print a verbose removal line."""
    console.print(escape(line), style="removed", soft_wrap=True)


def print_cannot_remove(path: str, reason: str) -> None:
    """Print a per-target failure in coreutils style."""
    err_console.print(
        f"{PROG_NAME}: cannot remove [path]'{escape(path)}'[/]: [reason]{escape(reason)}[/]",
        soft_wrap=True,
    )


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"{PROG_NAME}: [warning]warning:[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"{PROG_NAME}: [reason]{escape(message)}[/]", soft_wrap=True)
