"""Deterministic test doubles for process execution."""

from procfake.errors import ConfigurationError as ConfigurationError
from procfake.errors import DecodeError as DecodeError
from procfake.errors import ProcfakeError as ProcfakeError
from procfake.errors import VerificationError as VerificationError
from procfake.gateway.process_manager import FakeProcess as FakeProcess
from procfake.gateway.process_manager import FakeProcessManager as FakeProcessManager
from procfake.gateway.process_manager import Process as Process
from procfake.gateway.process_manager import ProcessManager as ProcessManager
from procfake.gateway.process_manager import ProcessResult as ProcessResult
