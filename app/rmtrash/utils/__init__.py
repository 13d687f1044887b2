"""Utility modules for rmtrash.

This module exports commonly used output functions.
"""

from rmtrash.utils.formatting import (
    console,
    err_console,
    print_cannot_remove,
    print_error,
    print_removed,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_cannot_remove",
    "print_error",
    "print_removed",
    "print_warning",
]
