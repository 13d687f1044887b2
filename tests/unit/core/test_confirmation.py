"""Unit tests for ConfirmationPolicy and StaticAnswer."""

import pytest
from rmtrash.core.confirmation import ConfirmationPolicy, StaticAnswer
from rmtrash.models.config import InteractiveMode, RemovalConfig
from rmtrash.models.entry import EntryType, Target


def _target(path: str, entry_type: EntryType = EntryType.REGULAR_FILE) -> Target:
    return Target(path=path, absolute_path=f"/work/{path}", entry_type=entry_type)


def _policy(
    question: StaticAnswer,
    mode: InteractiveMode,
    batch_size: int = 2,
    **flags: bool,
) -> ConfirmationPolicy:
    config = RemovalConfig(interactive_mode=mode, **flags)
    return ConfirmationPolicy(config, question, batch_size=batch_size)


class TestNever:
    """Tests for InteractiveMode.NEVER."""

    def test_never_asks(self) -> None:
        """NEVER approves without asking."""
        question = StaticAnswer(False)
        policy = _policy(question, InteractiveMode.NEVER)

        assert policy.confirm(_target("a.txt")) is True
        assert question.asked == []


class TestAlways:
    """Tests for InteractiveMode.ALWAYS."""

    @pytest.mark.parametrize(
        ("entry_type", "message"),
        [
            (EntryType.REGULAR_FILE, "remove regular file 'x'?"),
            (EntryType.SYMBOLIC_LINK, "remove symbolic link 'x'?"),
            (EntryType.DIRECTORY, "remove directory 'x'?"),
        ],
    )
    def test_message_names_entry(self, entry_type: EntryType, message: str) -> None:
        """The prompt names the kind of entry and its path."""
        question = StaticAnswer(True)

        _policy(question, InteractiveMode.ALWAYS).confirm(_target("x", entry_type))

        assert question.asked == [message]

    def test_asks_every_target(self) -> None:
        """Every target is asked about separately."""
        question = StaticAnswer(False)
        policy = _policy(question, InteractiveMode.ALWAYS)

        assert policy.confirm(_target("a")) is False
        assert policy.confirm(_target("b")) is False
        assert len(question.asked) == 2
        assert policy.declined is False

    def test_force_still_asks(self) -> None:
        """force does not silence per-target prompts."""
        question = StaticAnswer(True)

        _policy(question, InteractiveMode.ALWAYS, force=True).confirm(_target("a"))

        assert len(question.asked) == 1


class TestOnce:
    """Tests for InteractiveMode.ONCE."""

    def test_asks_once_per_batch(self) -> None:
        """The batch question is asked a single time."""
        question = StaticAnswer(True)
        policy = _policy(question, InteractiveMode.ONCE, batch_size=3)

        assert all(policy.confirm(_target(name)) for name in ("a", "b", "c"))
        assert question.asked == ["remove 3 arguments?"]

    def test_decline_is_remembered(self) -> None:
        """A declined batch stays declined."""
        question = StaticAnswer(False)
        policy = _policy(question, InteractiveMode.ONCE)

        assert policy.confirm(_target("a")) is False
        assert policy.declined is True
        assert policy.confirm(_target("b")) is False
        assert len(question.asked) == 1

    def test_force_skips_prompt(self) -> None:
        """force approves the batch without asking."""
        question = StaticAnswer(False)
        policy = _policy(question, InteractiveMode.ONCE, force=True)

        assert policy.confirm(_target("a")) is True
        assert question.asked == []
        assert policy.declined is False

    @pytest.mark.parametrize(
        ("batch_size", "recursive", "message"),
        [
            (1, False, "remove 1 argument?"),
            (4, False, "remove 4 arguments?"),
            (1, True, "remove 1 argument recursively?"),
        ],
    )
    def test_batch_message(self, batch_size: int, recursive: bool, message: str) -> None:
        """The batch prompt counts the arguments."""
        question = StaticAnswer(True)

        _policy(
            question, InteractiveMode.ONCE, batch_size=batch_size, recursive=recursive
        ).confirm(_target("a"))

        assert question.asked == [message]


class TestStaticAnswer:
    """Tests for StaticAnswer."""

    def test_records_messages(self) -> None:
        """StaticAnswer returns its value and records each message."""
        question = StaticAnswer(True)

        assert question.ask("first?") is True
        assert question.ask("second?") is True
        assert question.asked == ["first?", "second?"]
