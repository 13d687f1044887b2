"""Removal configuration models.

This module defines the immutable flag record that drives a single
rmtrash invocation, mirroring the options of the classic rm command.
"""

from dataclasses import dataclass
from enum import Enum


class InteractiveMode(str, Enum):
    """When to ask the user for confirmation.

    Attributes:
        NEVER: Never prompt.
        ONCE: Prompt a single time for the whole batch (rm -I).
        ALWAYS: Prompt before every removal (rm -i).
    """

    NEVER = "never"
    ONCE = "once"
    ALWAYS = "always"


@dataclass(frozen=True, slots=True)
class RemovalConfig:
    """Flags controlling how targets are removed.

    Constructed once per invocation and read-only afterwards.

    Attributes:
        interactive_mode: Confirmation policy.
        force: Ignore nonexistent targets and skip the batch prompt.
        recursive: Allow removing non-empty directories.
        empty_dirs: Allow removing empty directories without recursive.
        preserve_root: Refuse to operate on the filesystem root.
        one_file_system: Refuse recursive removal across mount boundaries.
        verbose: Print a line for every removed entry.
    """

    interactive_mode: InteractiveMode = InteractiveMode.NEVER
    force: bool = False
    recursive: bool = False
    empty_dirs: bool = False
    preserve_root: bool = True
    one_file_system: bool = False
    verbose: bool = False
