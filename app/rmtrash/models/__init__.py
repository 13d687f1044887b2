"""Data models for rmtrash.

This module exports the core data structures used throughout the application.
"""

from rmtrash.models.config import InteractiveMode, RemovalConfig
from rmtrash.models.entry import EntryType, Target
from rmtrash.models.outcome import ErrorKind, OutcomeStatus, RemovalOutcome

__all__ = [
    "EntryType",
    "ErrorKind",
    "InteractiveMode",
    "OutcomeStatus",
    "RemovalConfig",
    "RemovalOutcome",
    "Target",
]
