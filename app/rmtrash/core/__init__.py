"""Removal decision engine.

This module exports the batch orchestrator and the components it drives:
classification, safety guards, confirmation and execution.
"""

from rmtrash.core.classifier import EntryClassifier
from rmtrash.core.confirmation import ConfirmationPolicy, Question, StaticAnswer
from rmtrash.core.executor import RemovalExecutor
from rmtrash.core.guards import GuardVerdict, SafetyGuardChain
from rmtrash.core.trash import Trash

__all__ = [
    "ConfirmationPolicy",
    "EntryClassifier",
    "GuardVerdict",
    "Question",
    "RemovalExecutor",
    "SafetyGuardChain",
    "StaticAnswer",
    "Trash",
]
