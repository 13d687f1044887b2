"""Filesystem entry models.

This module defines how a target path is classified on disk before any
removal decision is made.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """On-disk nature of a target, determined without following symlinks.

    Attributes:
        MISSING: Nothing exists at the path.
        REGULAR_FILE: Ordinary file or hard link (also FIFOs, sockets, devices).
        SYMBOLIC_LINK: Symbolic link, regardless of what it points to.
        DIRECTORY: Directory, possibly empty.
    """

    MISSING = "missing"
    REGULAR_FILE = "regular_file"
    SYMBOLIC_LINK = "symbolic_link"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and messages."""
        return _LABELS[self]


_LABELS: dict[EntryType, str] = {
    EntryType.MISSING: "nonexistent file",
    EntryType.REGULAR_FILE: "regular file",
    EntryType.SYMBOLIC_LINK: "symbolic link",
    EntryType.DIRECTORY: "directory",
}


@dataclass(frozen=True, slots=True)
class Target:
    """A classified removal target.

    Attributes:
        path: Path as supplied by the caller (used in messages).
        absolute_path: Path resolved against the working directory.
        entry_type: What the path refers to on disk.
    """

    path: str
    absolute_path: str
    entry_type: EntryType

    def __post_init__(self) -> None:
        """Validate target data after initialization."""
        if not self.path:
            msg = "Target path cannot be empty"
            raise ValueError(msg)

    @property
    def exists(self) -> bool:
        """Check if anything exists at the target path."""
        return self.entry_type != EntryType.MISSING

    @property
    def is_directory(self) -> bool:
        """Check if the target is a real directory (not a link to one)."""
        return self.entry_type == EntryType.DIRECTORY
