"""Batch removal orchestration.

The Trash class drives every path of a batch through classification,
safety guards, confirmation and the trash move, strictly in the order
given. Each path yields exactly one RemovalOutcome; a failed path never
stops the paths after it.
"""

import logging
import os
from collections.abc import Iterable, Iterator

from rmtrash.core.classifier import EntryClassifier
from rmtrash.core.confirmation import ConfirmationPolicy, Question
from rmtrash.core.executor import Echo, RemovalExecutor
from rmtrash.core.guards import SafetyGuardChain
from rmtrash.filesystem.local import LocalFileSystem
from rmtrash.filesystem.provider import FileSystemProvider
from rmtrash.models.config import RemovalConfig
from rmtrash.models.outcome import (
    ErrorKind,
    RemovalOutcome,
    failed,
    skipped_by_user,
    skipped_missing,
)

logger = logging.getLogger(__name__)


class Trash:
    """Removes batches of paths by moving them to the trash.

    Example:
        >>> trash = Trash(RemovalConfig(recursive=True), StaticAnswer(True))
        >>> trash.remove_multiple(["build", "dist/app.tar.gz"])
        True

    Attributes:
        config: Removal flags for this invocation.
    """

    def __init__(
        self,
        config: RemovalConfig,
        question: Question,
        file_system: FileSystemProvider | None = None,
        working_dir: str | os.PathLike[str] | None = None,
        echo: Echo | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            config: Removal flags.
            question: Oracle used for interactive confirmation.
            file_system: Filesystem provider. Defaults to LocalFileSystem.
            working_dir: Directory relative paths are resolved against.
                Defaults to the process working directory, read again at
                the start of every batch.
            echo: Output function for verbose lines. Defaults to print.
        """
        self.config = config
        self._question = question
        self._file_system = file_system or LocalFileSystem()
        self._working_dir = os.path.abspath(working_dir) if working_dir is not None else None
        self._executor = RemovalExecutor(self._file_system, verbose=config.verbose, echo=echo)

    @property
    def working_dir(self) -> str:
        """Directory relative paths of the next batch are resolved against."""
        return self._working_dir or os.getcwd()

    def remove_multiple(self, paths: Iterable[str]) -> bool:
        """Remove every path and report overall success.

        Every path is attempted even after a failure.

        Args:
            paths: Paths to remove, in order.

        Returns:
            True if no path failed (user skips and forced misses are not
            failures), False otherwise.
        """
        outcomes = self.process(paths)
        return not any(outcome.failed for outcome in outcomes)

    def process(self, paths: Iterable[str]) -> list[RemovalOutcome]:
        """Remove every path and return one outcome per path."""
        return list(self.iter_outcomes(paths))

    def iter_outcomes(self, paths: Iterable[str]) -> Iterator[RemovalOutcome]:
        """Remove paths one at a time, yielding each outcome as it is known.

        Args:
            paths: Paths to remove, in order.

        Yields:
            RemovalOutcome for each path, in input order.
        """
        path_list = list(paths)
        working_dir = self.working_dir
        classifier = EntryClassifier(self._file_system, working_dir)
        guards = SafetyGuardChain(self.config, self._file_system, working_dir)
        policy = ConfirmationPolicy(self.config, self._question, batch_size=len(path_list))

        for path in path_list:
            outcome = self._remove_single(path, classifier, guards, policy)
            logger.debug("%s -> %s", path, outcome.status.value)
            yield outcome

    def _remove_single(
        self,
        path: str,
        classifier: EntryClassifier,
        guards: SafetyGuardChain,
        policy: ConfirmationPolicy,
    ) -> RemovalOutcome:
        """Run one path through the full pipeline.

        Args:
            path: Path as supplied by the caller.
            classifier: Classifier bound to the batch working directory.
            guards: Guard chain bound to the batch working directory.
            policy: Confirmation policy shared by the batch.

        Returns:
            Outcome for the path.
        """
        if policy.declined:
            return skipped_by_user(path)

        # An empty operand names nothing, as with rm.
        if not path:
            if self.config.force:
                return skipped_missing(path)
            return failed(path, ErrorKind.NOT_FOUND, "No such file or directory")

        try:
            target = classifier.classify(path)
            verdict = guards.check(target)
        except OSError as e:
            return failed(path, ErrorKind.OS_FAILURE, e.strerror or str(e))

        if verdict.outcome is not None:
            return verdict.outcome

        if not policy.confirm(target):
            return skipped_by_user(path)

        return self._executor.execute(target)
