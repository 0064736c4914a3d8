"""Fake ProcessManager implementation for testing.

FakeProcessManager answers every spawn request from pre-registered canned
results and records each call, enabling fast and deterministic tests of code
that shells out.
"""

import logging
import signal as signals
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path

from procfake.command_key import command_key
from procfake.gateway.process_manager.abc import ProcessManager
from procfake.gateway.process_manager.fake_process import FakeProcess
from procfake.gateway.process_manager.recorder import InvocationRecorder
from procfake.gateway.process_manager.result_queue import ResultQueue
from procfake.gateway.process_manager.stream_capture import StreamCapture, TextReceivedCallback
from procfake.gateway.process_manager.types import (
    CanRunCall,
    Invocation,
    KillPidCall,
    ProcessResult,
    SpawnMethod,
)

logger = logging.getLogger(__name__)


class FakeProcessManager(ProcessManager):
    """In-memory fake that returns canned results for each command line.

    Call set_results() to provide the stdout of each successive call per
    command line, and verify_calls() to check which commands ran, in order.

    Constructor Injection:
    ---------------------
    - stdin_results: Called with the decoded text of every write to the
      stdin of a started process
    - results: Initial canned results, same shape as set_results()
    - encoding: Codec for stdout/stderr bytes and stdin decoding

    Mutation Tracking:
    -----------------
    - invocations: start/run/run_sync calls, in call order
    - can_run_calls: can_run() calls
    - kill_pid_calls: kill_pid() calls
    """

    def __init__(
        self,
        *,
        stdin_results: TextReceivedCallback | None = None,
        results: Mapping[str, Sequence[str]] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._stdin_results = stdin_results
        self._encoding = encoding
        self._queue = ResultQueue()
        self._recorder = InvocationRecorder()
        self._lock = threading.Lock()
        self._can_run_calls: list[CanRunCall] = []
        self._kill_pid_calls: list[KillPidCall] = []
        if results is not None:
            self._queue.register(results)

    # ============================================================================
    # Test Setup and Verification
    # ============================================================================

    def set_results(self, results: Mapping[str, Sequence[str]]) -> None:
        """Replace all canned results.

        Args:
            results: Mapping of command line (arguments joined by single
                spaces) to the stdout of each successive call. Each call
                exits 0 with empty stderr.
        """
        with self._lock:
            self._queue.register(results)

    def verify_calls(self, calls: Sequence[str]) -> None:
        """Verify that exactly the given command lines were called, in order.

        Raises:
            VerificationError: If the recorded calls differ
        """
        with self._lock:
            self._recorder.verify(calls)

    def remaining_results(self, command_line: str) -> int:
        """Number of canned results not yet consumed for a command line."""
        with self._lock:
            return self._queue.remaining(command_line)

    # ============================================================================
    # Query Operations
    # ============================================================================

    def can_run(self, executable: str, *, working_directory: str | Path | None = None) -> bool:
        """Always True: executability is not faked."""
        self._can_run_calls.append(
            CanRunCall(executable=executable, working_directory=working_directory)
        )
        return True

    # ============================================================================
    # Spawn Operations
    # ============================================================================

    async def start(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> FakeProcess:
        result = self._next_result("start", args, environment, working_directory)
        capture = StreamCapture(self._stdin_results, encoding=self._encoding)
        return FakeProcess(result, capture=capture)

    async def run(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> ProcessResult:
        return self._next_result("run", args, environment, working_directory)

    def run_sync(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> ProcessResult:
        return self._next_result("run_sync", args, environment, working_directory)

    def kill_pid(self, pid: int, signal: int = signals.SIGTERM) -> bool:
        """Always True; running FakeProcess instances are unaffected."""
        self._kill_pid_calls.append(KillPidCall(pid=pid, signal=signal))
        return True

    def _next_result(
        self,
        method: SpawnMethod,
        args: Sequence[str],
        environment: Mapping[str, str] | None,
        working_directory: str | Path | None,
    ) -> ProcessResult:
        invocation = Invocation(
            method=method,
            args=tuple(args),
            environment=tuple(sorted(environment.items())) if environment is not None else None,
            working_directory=working_directory,
        )
        # Record before popping so a misconfigured call still shows up in the log
        with self._lock:
            self._recorder.record(invocation)
            logger.debug("%s: %s", method, invocation.command_line)
            return self._queue.pop(command_key(args))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def invocations(self) -> list[Invocation]:
        """Get start/run/run_sync calls made during the test, oldest first.

        This property is for test assertions only.
        """
        with self._lock:
            return self._recorder.invocations

    @property
    def can_run_calls(self) -> list[CanRunCall]:
        """This property is for test assertions only."""
        return list(self._can_run_calls)

    @property
    def kill_pid_calls(self) -> list[KillPidCall]:
        """This property is for test assertions only."""
        return list(self._kill_pid_calls)
