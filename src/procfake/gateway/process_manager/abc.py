"""Process manager abstraction for testing.

This module provides ABCs for spawning external commands and for the
processes they produce, so that tools built on top of them can be tested
against a fake without running real subprocesses.
"""

import signal as signals
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Mapping, Sequence
from pathlib import Path

from procfake.gateway.process_manager.types import ProcessResult


class ProcessInput(ABC):
    """Writable standard input of a spawned process."""

    @abstractmethod
    def write(self, data: bytes | str) -> None:
        """Queue data for the process. Never blocks."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Signal end of input and wait until it has been consumed."""
        ...


class Process(ABC):
    """A process started by a ProcessManager."""

    @property
    @abstractmethod
    def pid(self) -> int:
        """Operating system process id."""
        ...

    @property
    @abstractmethod
    def stdin(self) -> ProcessInput:
        """Standard input sink."""
        ...

    @property
    @abstractmethod
    def stdout(self) -> AsyncIterator[bytes]:
        """Standard output as a single-use stream of byte chunks."""
        ...

    @property
    @abstractmethod
    def stderr(self) -> AsyncIterator[bytes]:
        """Standard error as a single-use stream of byte chunks."""
        ...

    @abstractmethod
    async def wait(self) -> int:
        """Wait for the process to exit.

        Returns:
            The exit code of the process
        """
        ...

    @abstractmethod
    def kill(self, signal: int = signals.SIGTERM) -> bool:
        """Send a signal to the process.

        Returns:
            True if the signal was delivered, False otherwise
        """
        ...


class ProcessManager(ABC):
    """Abstract process spawning for dependency injection.

    All implementations (fake, printing) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def can_run(self, executable: str, *, working_directory: str | Path | None = None) -> bool:
        """Check whether an executable can be run.

        Args:
            executable: Program name or path
            working_directory: Directory relative paths are resolved against

        Returns:
            True if the executable can be run, False otherwise
        """
        ...

    # ============================================================================
    # Spawn Operations
    # ============================================================================

    @abstractmethod
    async def start(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> Process:
        """Start a command and return a handle to the running process.

        Args:
            args: Command-line arguments, program first
            environment: Environment for the process, or None to inherit
            working_directory: Directory to run in, or None for the current one

        Returns:
            Process handle for the started command
        """
        ...

    @abstractmethod
    async def run(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> ProcessResult:
        """Run a command to completion.

        Takes the same arguments as start().

        Returns:
            ProcessResult with exit code and decoded output
        """
        ...

    @abstractmethod
    def run_sync(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> ProcessResult:
        """Run a command to completion without suspending the caller.

        Takes the same arguments as start().
        """
        ...

    @abstractmethod
    def kill_pid(self, pid: int, signal: int = signals.SIGTERM) -> bool:
        """Send a signal to a process by id.

        Returns:
            True if the signal was delivered, False otherwise
        """
        ...
