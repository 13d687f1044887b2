"""Abstract base class for filesystem providers.

This module defines the FileSystemProvider interface the removal engine
uses for every query and for the trash move itself. Keeping all OS
access behind this interface lets tests substitute a fake filesystem.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from rmtrash.models.entry import EntryType

# Visitor for enumerate_subpaths: return False to stop the traversal.
SubpathVisitor = Callable[[str], bool]


class FileSystemProvider(ABC):
    """Abstract base class for filesystem access.

    All paths passed to a provider are absolute. Query failures other
    than "does not exist" are raised as OSError.

    Example:
        >>> fs = LocalFileSystem()
        >>> if fs.file_type("/tmp/old.log") == EntryType.REGULAR_FILE:
        ...     fs.trash_item("/tmp/old.log")
    """

    @abstractmethod
    def file_type(self, path: str) -> EntryType | None:
        """Determine the entry type without following symbolic links.

        Args:
            path: Absolute path to inspect.

        Returns:
            EntryType of the entry, or None if nothing exists at path.

        Raises:
            OSError: If the entry exists but cannot be inspected.
        """

    @abstractmethod
    def is_root_directory(self, path: str) -> bool:
        """Check if path is the root of the filesystem.

        Args:
            path: Absolute path to check.

        Returns:
            True if path refers to the filesystem root.
        """

    @abstractmethod
    def is_empty_directory(self, path: str) -> bool:
        """Check if a directory has no entries.

        Args:
            path: Absolute path to an existing directory.

        Returns:
            True if the directory is empty.

        Raises:
            OSError: If the directory cannot be listed.
        """

    @abstractmethod
    def is_cross_mount_point(self, path: str, reference: str) -> bool:
        """Check if path lives on a different filesystem than reference.

        Args:
            path: Absolute path to check.
            reference: Absolute path of the reference point.

        Returns:
            True if the two paths are on different devices.

        Raises:
            OSError: If either path cannot be inspected.
        """

    @abstractmethod
    def trash_item(self, path: str) -> None:
        """Move an entry (file, link, or whole directory) to the trash.

        Args:
            path: Absolute path of the entry to trash.

        Raises:
            OSError: If the entry could not be moved.
        """

    @abstractmethod
    def enumerate_subpaths(
        self,
        root: str,
        visit: SubpathVisitor,
        max_depth: int | None = None,
    ) -> None:
        """Walk the descendants of a directory, depth first.

        Symbolic links are passed to the visitor but never descended into.

        Args:
            root: Absolute path of the directory to walk.
            visit: Called with each descendant path; returning False stops
                the traversal.
            max_depth: Maximum depth to descend (1 = direct children only).
                None means unbounded.

        Raises:
            OSError: If a directory cannot be listed.
        """
