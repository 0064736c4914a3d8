"""Printing process manager wrapper for verbose output.

This module provides a wrapper that prints styled command lines before
delegating to the wrapped process manager.
"""

import signal as signals
from collections.abc import Mapping, Sequence
from pathlib import Path

from procfake.command_key import command_key
from procfake.gateway.process_manager.abc import Process, ProcessManager
from procfake.gateway.process_manager.types import ProcessResult
from procfake.printing.base import PrintingBase


class PrintingProcessManager(PrintingBase, ProcessManager):
    """Wrapper that prints each spawned command before delegating.

    Usage:
        manager = PrintingProcessManager(FakeProcessManager(), script_mode=False, dry_run=False)
    """

    _wrapped: ProcessManager

    # Inherits __init__, _emit, and _format_command from PrintingBase

    # ============================================================================
    # Query Operations (delegate without printing)
    # ============================================================================

    def can_run(self, executable: str, *, working_directory: str | Path | None = None) -> bool:
        return self._wrapped.can_run(executable, working_directory=working_directory)

    # ============================================================================
    # Spawn Operations (print before delegating)
    # ============================================================================

    async def start(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> Process:
        self._emit(self._format_command(command_key(args)))
        return await self._wrapped.start(
            args, environment=environment, working_directory=working_directory
        )

    async def run(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> ProcessResult:
        self._emit(self._format_command(command_key(args)))
        return await self._wrapped.run(
            args, environment=environment, working_directory=working_directory
        )

    def run_sync(
        self,
        args: Sequence[str],
        *,
        environment: Mapping[str, str] | None = None,
        working_directory: str | Path | None = None,
    ) -> ProcessResult:
        self._emit(self._format_command(command_key(args)))
        return self._wrapped.run_sync(
            args, environment=environment, working_directory=working_directory
        )

    def kill_pid(self, pid: int, signal: int = signals.SIGTERM) -> bool:
        self._emit(self._format_command(f"kill -{signal} {pid}"))
        return self._wrapped.kill_pid(pid, signal)
