"""Tests for InvocationRecorder."""

import pytest

from procfake.errors import VerificationError
from procfake.gateway.process_manager.recorder import InvocationRecorder
from procfake.gateway.process_manager.types import Invocation


def _invocation(*args: str, working_directory: str | None = None) -> Invocation:
    return Invocation(
        method="run",
        args=args,
        environment=None,
        working_directory=working_directory,
    )


def _recorder(*invocations: Invocation) -> InvocationRecorder:
    recorder = InvocationRecorder()
    for invocation in invocations:
        recorder.record(invocation)
    return recorder


class TestInvocationRecorderVerify:
    def test_passes_for_matching_calls_in_order(self) -> None:
        recorder = _recorder(_invocation("git", "status"), _invocation("git", "add", "."))

        recorder.verify(["git status", "git add ."])

    def test_passes_for_no_calls(self) -> None:
        InvocationRecorder().verify([])

    def test_fails_on_wrong_order(self) -> None:
        recorder = _recorder(_invocation("git", "status"), _invocation("git", "add", "."))

        with pytest.raises(VerificationError):
            recorder.verify(["git add .", "git status"])

    def test_fails_on_missing_call(self) -> None:
        recorder = _recorder(_invocation("git", "status"))

        with pytest.raises(VerificationError) as exc_info:
            recorder.verify(["git status", "git add ."])

        assert exc_info.value.expected == ["git status", "git add ."]
        assert exc_info.value.actual == ["git status"]

    def test_fails_on_extra_call(self) -> None:
        recorder = _recorder(_invocation("git", "status"), _invocation("git", "status"))

        with pytest.raises(VerificationError):
            recorder.verify(["git status"])

    def test_fails_on_different_arguments(self) -> None:
        recorder = _recorder(_invocation("git", "add", "README.md"))

        with pytest.raises(VerificationError):
            recorder.verify(["git add ."])

    def test_ignores_named_options(self) -> None:
        recorder = _recorder(_invocation("make", working_directory="/repo"))

        recorder.verify(["make"])

    def test_error_message_lists_both_sides(self) -> None:
        recorder = _recorder(_invocation("ls"))

        with pytest.raises(VerificationError) as exc_info:
            recorder.verify(["pwd"])

        message = str(exc_info.value)
        assert "Expected (1):\n  pwd" in message
        assert "Actual (1):\n  ls" in message


class TestInvocationRecorderInvocations:
    def test_invocations_in_call_order(self) -> None:
        first = _invocation("a")
        second = _invocation("b")
        recorder = _recorder(first, second)

        assert recorder.invocations == [first, second]

    def test_invocations_returns_copy(self) -> None:
        recorder = _recorder(_invocation("a"))

        recorder.invocations.clear()

        assert len(recorder.invocations) == 1
