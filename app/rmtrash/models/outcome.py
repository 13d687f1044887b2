"""Outcome models for removal operations.

Every target in a batch produces exactly one RemovalOutcome. Failures
are values rather than exceptions so that one bad target never aborts
the rest of the batch.
"""

from dataclasses import dataclass
from enum import Enum


class OutcomeStatus(str, Enum):
    """Final state of a single target.

    Attributes:
        REMOVED: Target was moved to the trash.
        SKIPPED_BY_USER: User declined the confirmation prompt.
        SKIPPED_MISSING: Target did not exist and force was set.
        FAILED: Target could not be removed (see ErrorKind).
    """

    REMOVED = "removed"
    SKIPPED_BY_USER = "skipped_by_user"
    SKIPPED_MISSING = "skipped_missing"
    FAILED = "failed"


class ErrorKind(str, Enum):
    """Why a target failed.

    Attributes:
        NOT_FOUND: Target is absent and force was not set.
        ROOT_PROTECTED: Target is the filesystem root and preserve_root is set.
        DIRECTORY_REQUIRES_RECURSIVE: Directory removal not permitted by flags.
        DOT_DIRECTORY: Target path ends in "." or "..".
        CROSS_MOUNT_BOUNDARY: Recursive removal would leave the filesystem.
        OS_FAILURE: The operating system rejected a query or the trash move.
    """

    NOT_FOUND = "not_found"
    ROOT_PROTECTED = "root_protected"
    DOT_DIRECTORY = "dot_directory"
    DIRECTORY_REQUIRES_RECURSIVE = "directory_requires_recursive"
    CROSS_MOUNT_BOUNDARY = "cross_mount_boundary"
    OS_FAILURE = "os_failure"


@dataclass(frozen=True, slots=True)
class RemovalOutcome:
    """Result of processing one target.

    Attributes:
        path: Target path as supplied by the caller.
        status: What happened to the target.
        error_kind: Failure category, set only when status is FAILED.
        error: Human-readable failure reason, set only when status is FAILED.
    """

    path: str
    status: OutcomeStatus
    error_kind: ErrorKind | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that failure details accompany failures only."""
        if (self.status == OutcomeStatus.FAILED) != (self.error_kind is not None):
            msg = "error_kind must be set if and only if status is FAILED"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the target failed."""
        return self.status == OutcomeStatus.FAILED

    @property
    def removed(self) -> bool:
        """Check if the target was moved to the trash."""
        return self.status == OutcomeStatus.REMOVED

    @property
    def skipped(self) -> bool:
        """Check if the target was skipped without error."""
        return self.status in (OutcomeStatus.SKIPPED_BY_USER, OutcomeStatus.SKIPPED_MISSING)


def removed(path: str) -> RemovalOutcome:
    """Create an outcome for a target that was trashed."""
    return RemovalOutcome(path=path, status=OutcomeStatus.REMOVED)


def skipped_by_user(path: str) -> RemovalOutcome:
    """Create an outcome for a target the user declined."""
    return RemovalOutcome(path=path, status=OutcomeStatus.SKIPPED_BY_USER)


def skipped_missing(path: str) -> RemovalOutcome:
    """Create an outcome for a missing target absorbed by force."""
    return RemovalOutcome(path=path, status=OutcomeStatus.SKIPPED_MISSING)


def failed(path: str, kind: ErrorKind, error: str) -> RemovalOutcome:
    """Create a failure outcome.

    Args:
        path: Target path as supplied by the caller.
        kind: Failure category.
        error: Human-readable reason.

    Returns:
        RemovalOutcome with FAILED status.
    """
    return RemovalOutcome(path=path, status=OutcomeStatus.FAILED, error_kind=kind, error=error)
