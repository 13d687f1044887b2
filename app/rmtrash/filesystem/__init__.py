"""Filesystem access for rmtrash.

This module provides the FileSystemProvider interface used by the
removal engine and its local, send2trash-backed implementation.
"""

from rmtrash.filesystem.local import LocalFileSystem
from rmtrash.filesystem.provider import FileSystemProvider, SubpathVisitor

__all__ = [
    "FileSystemProvider",
    "LocalFileSystem",
    "SubpathVisitor",
]
