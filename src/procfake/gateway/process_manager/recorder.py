"""Ordered log of calls made to a fake process manager."""

from collections.abc import Sequence

from procfake.command_key import split_command_line
from procfake.errors import VerificationError
from procfake.gateway.process_manager.types import Invocation


class InvocationRecorder:
    """Append-only log of invocations in call order."""

    def __init__(self) -> None:
        self._invocations: list[Invocation] = []

    def record(self, invocation: Invocation) -> None:
        self._invocations.append(invocation)

    def verify(self, expected: Sequence[str]) -> None:
        """Check the log against expected command lines, in order.

        Only positional arguments are compared; environment and working
        directory are ignored.

        Args:
            expected: One command line per expected call, e.g. "git status"

        Raises:
            VerificationError: If the number of calls or any call differs
        """
        actual = [invocation.command_line for invocation in self._invocations]
        if len(expected) != len(self._invocations):
            raise VerificationError(expected=list(expected), actual=actual)
        for call, invocation in zip(expected, self._invocations, strict=True):
            if split_command_line(call) != list(invocation.args):
                raise VerificationError(expected=list(expected), actual=actual)

    @property
    def invocations(self) -> list[Invocation]:
        """Copy of the recorded invocations, oldest first."""
        return list(self._invocations)
