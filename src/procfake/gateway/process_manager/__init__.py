"""Process manager gateway: interface, fake and printing wrapper."""

from procfake.gateway.process_manager.abc import Process as Process
from procfake.gateway.process_manager.abc import ProcessInput as ProcessInput
from procfake.gateway.process_manager.abc import ProcessManager as ProcessManager
from procfake.gateway.process_manager.fake import FakeProcessManager as FakeProcessManager
from procfake.gateway.process_manager.fake_process import FakeProcess as FakeProcess
from procfake.gateway.process_manager.fake_process import FakeStdin as FakeStdin
from procfake.gateway.process_manager.printing import (
    PrintingProcessManager as PrintingProcessManager,
)
from procfake.gateway.process_manager.stream_capture import StreamCapture as StreamCapture
from procfake.gateway.process_manager.types import Invocation as Invocation
from procfake.gateway.process_manager.types import ProcessResult as ProcessResult
