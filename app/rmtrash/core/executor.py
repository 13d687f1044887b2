"""Removal executor.

Moves approved targets to the trash through the filesystem provider and
maps failures to OS_FAILURE outcomes.
"""

import logging
from collections.abc import Callable

from rmtrash.filesystem.provider import FileSystemProvider
from rmtrash.models.entry import Target
from rmtrash.models.outcome import ErrorKind, RemovalOutcome, failed, removed

logger = logging.getLogger(__name__)

# Receives one human-readable line per removed entry in verbose mode.
Echo = Callable[[str], None]


class RemovalExecutor:
    """Trashes targets that cleared guards and confirmation.

    Attributes:
        _file_system: Provider performing the trash move.
        _verbose: If True, report every removed entry through _echo.
        _echo: Output function for verbose lines.
    """

    def __init__(
        self,
        file_system: FileSystemProvider,
        verbose: bool = False,
        echo: Echo | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            file_system: Provider performing the trash move.
            verbose: If True, report every removed entry.
            echo: Output function for verbose lines. Defaults to print.
        """
        self._file_system = file_system
        self._verbose = verbose
        self._echo: Echo = echo or print

    def execute(self, target: Target) -> RemovalOutcome:
        """Move a single target to the trash.

        Args:
            target: Existing target approved for removal.

        Returns:
            REMOVED outcome, or FAILED with OS_FAILURE if the move failed.
        """
        try:
            self._file_system.trash_item(target.absolute_path)
        except OSError as e:
            logger.warning("Failed to trash %s: %s", target.absolute_path, e)
            return failed(target.path, ErrorKind.OS_FAILURE, e.strerror or str(e))

        logger.info("Trashed %s", target.absolute_path)
        if self._verbose:
            self._echo(self.describe(target))
        return removed(target.path)

    @staticmethod
    def describe(target: Target) -> str:
        """Format the verbose line for a removed target."""
        if target.is_directory:
            return f"removed directory '{target.path}'"
        return f"removed '{target.path}'"
