"""Local filesystem provider backed by the OS and send2trash.

Classifies entries with lstat so symbolic links are never followed, and
moves entries to the platform trash (freedesktop.org trash on Linux,
Finder trash on macOS, Recycle Bin on Windows) instead of unlinking them.
"""

import logging
import os
import stat
from pathlib import Path

from send2trash import send2trash

from rmtrash.filesystem.freedesktop import USES_FREEDESKTOP_TRASH, move_to_home_trash
from rmtrash.filesystem.provider import FileSystemProvider, SubpathVisitor
from rmtrash.models.entry import EntryType

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystemProvider):
    """FileSystemProvider for the machine rmtrash runs on."""

    def file_type(self, path: str) -> EntryType | None:
        """Determine the entry type using lstat.

        Hard links are indistinguishable from regular files at this level.
        FIFOs, sockets and device nodes are reported as REGULAR_FILE since
        they are removed the same way.

        Args:
            path: Absolute path to inspect.

        Returns:
            EntryType of the entry, or None if nothing exists at path.

        Raises:
            OSError: If the entry exists but cannot be inspected.
        """
        try:
            mode = Path(path).lstat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return None

        if stat.S_ISLNK(mode):
            return EntryType.SYMBOLIC_LINK
        if stat.S_ISDIR(mode):
            return EntryType.DIRECTORY
        return EntryType.REGULAR_FILE

    def is_root_directory(self, path: str) -> bool:
        """Check if path is the filesystem root.

        Compares device and inode with the root of the path's anchor, so
        spellings such as ``//``, ``/.`` and ``/tmp/..`` are all detected.
        A symbolic link pointing at the root is not the root.
        """
        target = Path(path)
        root = Path(target.anchor or os.sep)
        try:
            entry_stat = target.lstat()
            root_stat = root.lstat()
        except OSError:
            return False
        return (entry_stat.st_dev, entry_stat.st_ino) == (root_stat.st_dev, root_stat.st_ino)

    def is_empty_directory(self, path: str) -> bool:
        """Check if a directory has no entries."""
        with os.scandir(path) as entries:
            return next(entries, None) is None

    def is_cross_mount_point(self, path: str, reference: str) -> bool:
        """Check if path lives on a different device than reference.

        The path itself is inspected with lstat; the reference is followed
        since it is normally the working directory.
        """
        return Path(path).lstat().st_dev != Path(reference).stat().st_dev

    def trash_item(self, path: str) -> None:
        """Move an entry to the platform trash.

        Symbolic links and ".." in the parent are resolved by the OS first,
        since send2trash collapses ".." as text. The entry itself is never
        followed. Dangling symbolic links, which send2trash refuses, go
        straight to the freedesktop.org home trash.

        Raises:
            OSError: If the entry cannot be moved (including
                TrashPermissionError when no usable trash exists).
        """
        parent, name = os.path.split(path)
        physical_path = os.path.join(os.path.realpath(parent, strict=True), name)

        if (
            USES_FREEDESKTOP_TRASH
            and os.path.islink(physical_path)
            and not os.path.exists(physical_path)
        ):
            logger.debug("Sending dangling symlink to home trash: %s", physical_path)
            move_to_home_trash(physical_path)
            return

        logger.debug("Sending to trash: %s", physical_path)
        send2trash(physical_path)

    def enumerate_subpaths(
        self,
        root: str,
        visit: SubpathVisitor,
        max_depth: int | None = None,
    ) -> None:
        """Walk the descendants of root depth first without following links."""
        self._walk(root, visit, 1, max_depth)

    def _walk(
        self,
        directory: str,
        visit: SubpathVisitor,
        depth: int,
        max_depth: int | None,
    ) -> bool:
        """Visit the entries of one directory level.

        Args:
            directory: Directory to list.
            visit: Visitor callback.
            depth: Depth of the entries being listed (children of root = 1).
            max_depth: Maximum depth to descend, or None.

        Returns:
            False if the visitor asked to stop, True otherwise.
        """
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            if not visit(entry.path):
                return False
            if max_depth is not None and depth >= max_depth:
                continue
            if entry.is_dir(follow_symlinks=False):
                if not self._walk(entry.path, visit, depth + 1, max_depth):
                    return False
        return True
