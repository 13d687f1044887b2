"""Interactive confirmation for removals.

A Question answers yes/no prompts; the ConfirmationPolicy decides when
to ask based on the configured interactive mode:

- never: no prompts
- always: one prompt per target (a recursive directory is one target)
- once: a single prompt for the whole batch, skipped under force
"""

import logging
from abc import ABC, abstractmethod

from rmtrash.models.config import InteractiveMode, RemovalConfig
from rmtrash.models.entry import Target

logger = logging.getLogger(__name__)


class Question(ABC):
    """Answers yes/no confirmation prompts.

    Implementations keep no memory of earlier answers.
    """

    @abstractmethod
    def ask(self, message: str) -> bool:
        """Ask a yes/no question.

        Args:
            message: Prompt text, e.g. "remove regular file 'a.txt'?".

        Returns:
            True to proceed, False to skip.
        """


class StaticAnswer(Question):
    """Question that always gives the same answer.

    Attributes:
        value: Answer returned for every prompt.
        asked: Messages received so far, in order.
    """

    def __init__(self, value: bool) -> None:
        self.value = value
        self.asked: list[str] = []

    def ask(self, message: str) -> bool:
        self.asked.append(message)
        return self.value


class ConfirmationPolicy:
    """Turns the interactive mode into prompts for one batch.

    A new policy must be created for every batch, since ONCE mode
    remembers the single batch answer.

    Attributes:
        _config: Removal flags.
        _question: Oracle asked for confirmation.
        _batch_size: Number of paths in the batch (used in the ONCE prompt).
        _batch_answer: Answer to the ONCE prompt, None until asked.
    """

    def __init__(self, config: RemovalConfig, question: Question, batch_size: int) -> None:
        self._config = config
        self._question = question
        self._batch_size = batch_size
        self._batch_answer: bool | None = None

    @property
    def declined(self) -> bool:
        """Check if the batch-level prompt was answered no."""
        return self._batch_answer is False

    def confirm(self, target: Target) -> bool:
        """Decide whether a target that passed its guards may be removed.

        Args:
            target: Classified target.

        Returns:
            True if the removal is approved.
        """
        mode = self._config.interactive_mode

        if mode == InteractiveMode.ALWAYS:
            return self._question.ask(f"remove {target.entry_type.label} '{target.path}'?")

        if mode == InteractiveMode.ONCE:
            return self._confirm_batch()

        return True

    def _confirm_batch(self) -> bool:
        """Ask the batch-level question at most once."""
        if self._config.force:
            return True

        if self._batch_answer is None:
            self._batch_answer = self._question.ask(self._batch_message())
            logger.debug("Batch confirmation answered: %s", self._batch_answer)

        return self._batch_answer

    def _batch_message(self) -> str:
        noun = "argument" if self._batch_size == 1 else "arguments"
        suffix = " recursively" if self._config.recursive else ""
        return f"remove {self._batch_size} {noun}{suffix}?"
