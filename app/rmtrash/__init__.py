"""rmtrash - a safe rm replacement that moves files to the trash.

Reproduces the flag semantics of rm (force, recursive, interactive,
empty-directory removal, root protection, single-filesystem) while
routing every removal through the platform trash.
"""

__version__ = "0.1.0"
