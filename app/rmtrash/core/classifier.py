"""Entry classification for removal targets.

Resolves a caller-supplied path against an explicit working directory
and determines what it refers to on disk, without following symbolic
links and without caching between calls.
"""

import logging
import os
from pathlib import Path

from rmtrash.filesystem.provider import FileSystemProvider
from rmtrash.models.entry import EntryType, Target

logger = logging.getLogger(__name__)


class EntryClassifier:
    """Classifies target paths.

    Attributes:
        _file_system: Provider used for type queries.
        _working_dir: Absolute directory relative paths are resolved against.
    """

    def __init__(self, file_system: FileSystemProvider, working_dir: str) -> None:
        """Initialize the classifier.

        Args:
            file_system: Provider used for type queries.
            working_dir: Directory that relative paths are resolved against.
        """
        self._file_system = file_system
        self._working_dir = os.path.abspath(working_dir)

    @property
    def working_dir(self) -> str:
        """Directory relative paths are resolved against."""
        return self._working_dir

    def resolve(self, path: str) -> str:
        """Make a path absolute without changing what it refers to.

        Repeated slashes, "." components and trailing slashes are dropped.
        ".." components are kept: after a symbolic link they lead somewhere
        other than the textual parent, so only the OS may resolve them.
        """
        return str(Path(self._working_dir, path))

    def classify(self, path: str) -> Target:
        """Classify a single path.

        Args:
            path: Path as supplied by the caller.

        Returns:
            Target describing the path.

        Raises:
            OSError: If the entry exists but cannot be inspected.
        """
        absolute_path = self.resolve(path)
        entry_type = self._file_system.file_type(absolute_path) or EntryType.MISSING
        logger.debug("Classified %s (%s) as %s", path, absolute_path, entry_type.value)
        return Target(path=path, absolute_path=absolute_path, entry_type=entry_type)
