"""Safety checks applied before a target is trashed.

The checks run in a fixed order and stop at the first denial:

1. Missing target (absorbed by force)
2. Root protection (never overridable)
3. "." and ".." operands (never overridable)
4. Directory removal permission (recursive / empty_dirs)
5. Filesystem boundary (recursive with one_file_system)

Root protection comes before everything else that could allow a
removal, so no flag combination can get the root into the trash.
"""

import logging
import os
from dataclasses import dataclass

from rmtrash.filesystem.provider import FileSystemProvider
from rmtrash.models.config import RemovalConfig
from rmtrash.models.entry import EntryType, Target
from rmtrash.models.outcome import ErrorKind, RemovalOutcome, failed, skipped_missing

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GuardVerdict:
    """Decision of the guard chain for one target.

    Attributes:
        allowed: True if the target may proceed to confirmation.
        outcome: Final outcome when the target may not proceed, None otherwise.
    """

    allowed: bool
    outcome: RemovalOutcome | None = None

    def __post_init__(self) -> None:
        """Validate verdict consistency."""
        if self.allowed == (self.outcome is not None):
            msg = "A verdict carries an outcome if and only if it is a denial"
            raise ValueError(msg)


_ALLOW = GuardVerdict(allowed=True)


def _deny(outcome: RemovalOutcome) -> GuardVerdict:
    return GuardVerdict(allowed=False, outcome=outcome)


def _is_dot_operand(path: str) -> bool:
    """Check if the last component of a path is "." or ".."."""
    return os.path.basename(path.rstrip(os.sep)) in (".", "..")


class SafetyGuardChain:
    """Decides whether a classified target may be removed.

    Attributes:
        _config: Removal flags.
        _file_system: Provider used for root, emptiness and mount queries.
        _working_dir: Reference point for filesystem boundary checks.
    """

    def __init__(
        self,
        config: RemovalConfig,
        file_system: FileSystemProvider,
        working_dir: str,
    ) -> None:
        self._config = config
        self._file_system = file_system
        self._working_dir = working_dir

    def check(self, target: Target) -> GuardVerdict:
        """Run all checks against a target.

        Args:
            target: Classified target.

        Returns:
            GuardVerdict allowing the target, or denying it with an outcome.

        Raises:
            OSError: If a provider query fails.
        """
        if not target.exists:
            if self._config.force:
                logger.debug("Ignoring missing target: %s", target.path)
                return _deny(skipped_missing(target.path))
            return _deny(failed(target.path, ErrorKind.NOT_FOUND, "No such file or directory"))

        if self._config.preserve_root and self._file_system.is_root_directory(
            target.absolute_path
        ):
            return _deny(
                failed(
                    target.path,
                    ErrorKind.ROOT_PROTECTED,
                    "it is dangerous to operate recursively on '/'",
                )
            )

        if _is_dot_operand(target.path):
            return _deny(
                failed(
                    target.path,
                    ErrorKind.DOT_DIRECTORY,
                    "refusing to remove '.' or '..' directory",
                )
            )

        if target.entry_type == EntryType.DIRECTORY:
            verdict = self._check_directory(target)
            if not verdict.allowed:
                return verdict

        return _ALLOW

    def _check_directory(self, target: Target) -> GuardVerdict:
        """Apply the directory permission and boundary checks."""
        if not self._config.recursive:
            if not self._config.empty_dirs:
                return _deny(
                    failed(target.path, ErrorKind.DIRECTORY_REQUIRES_RECURSIVE, "Is a directory")
                )
            if not self._file_system.is_empty_directory(target.absolute_path):
                return _deny(
                    failed(
                        target.path,
                        ErrorKind.DIRECTORY_REQUIRES_RECURSIVE,
                        "Directory not empty",
                    )
                )
            return _ALLOW

        if self._config.one_file_system and self._crosses_mount(target):
            return _deny(
                failed(
                    target.path,
                    ErrorKind.CROSS_MOUNT_BOUNDARY,
                    "crosses a filesystem boundary",
                )
            )

        return _ALLOW

    def _crosses_mount(self, target: Target) -> bool:
        """Check if trashing the directory would cross a filesystem boundary.

        The directory itself must be on the working directory's filesystem,
        and no directory below it may be on another one. Symbolic links are
        never followed during the walk.
        """
        if self._file_system.is_cross_mount_point(target.absolute_path, self._working_dir):
            logger.debug("%s is on a different filesystem than %s", target.path, self._working_dir)
            return True

        crossing: list[str] = []

        def visit(subpath: str) -> bool:
            if self._file_system.file_type(subpath) != EntryType.DIRECTORY:
                return True
            if self._file_system.is_cross_mount_point(subpath, target.absolute_path):
                crossing.append(subpath)
                return False
            return True

        self._file_system.enumerate_subpaths(target.absolute_path, visit)

        if crossing:
            logger.debug("Mount point below %s: %s", target.path, crossing[0])
        return bool(crossing)
