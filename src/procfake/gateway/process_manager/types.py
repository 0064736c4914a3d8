"""Value types shared by process manager implementations."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

SpawnMethod = Literal["start", "run", "run_sync"]


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a command that ran to completion.

    Attributes:
        pid: Process id the command ran under
        exit_code: Exit status of the command
        stdout: Everything written to standard output, decoded
        stderr: Everything written to standard error, decoded
    """

    pid: int
    exit_code: int
    stdout: str
    stderr: str


@dataclass(frozen=True)
class Invocation:
    """Record of one start/run/run_sync call, for test assertions.

    Attributes:
        method: Which operation was called
        args: Positional command-line arguments, program first
        environment: Environment passed with the call as sorted (name, value)
            pairs, if any. Stored as a tuple so invocations stay hashable.
        working_directory: Working directory passed with the call, if any
    """

    method: SpawnMethod
    args: tuple[str, ...]
    environment: tuple[tuple[str, str], ...] | None
    working_directory: str | Path | None

    @property
    def command_line(self) -> str:
        return " ".join(self.args)

    @property
    def environment_dict(self) -> dict[str, str] | None:
        if self.environment is None:
            return None
        return dict(self.environment)


@dataclass(frozen=True)
class CanRunCall:
    executable: str
    working_directory: str | Path | None


@dataclass(frozen=True)
class KillPidCall:
    pid: int
    signal: int
