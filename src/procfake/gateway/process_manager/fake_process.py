"""Fake Process implementation for testing.

FakeProcess is an in-memory process whose exit code and output are fixed at
construction from a ProcessResult. Nothing runs: wait() resolves at once,
stdout and stderr each yield their whole text as one chunk, and stdin is
forwarded to a StreamCapture.
"""

import asyncio
import signal as signals
from collections.abc import AsyncIterator

from procfake.gateway.process_manager.abc import Process, ProcessInput
from procfake.gateway.process_manager.stream_capture import StreamCapture
from procfake.gateway.process_manager.types import ProcessResult

FAKE_PID = 0


async def _single_chunk(data: bytes) -> AsyncIterator[bytes]:
    yield data


class FakeStdin(ProcessInput):
    """Stdin sink that feeds written chunks through a StreamCapture.

    Writes go onto a queue drained by one consumer task attached to the
    capture. close() enqueues an end-of-input marker and waits for the
    capture, so every write has reached the callback once it returns.
    """

    def __init__(self, capture: StreamCapture) -> None:
        self._capture = capture
        self._queue: asyncio.Queue[bytes | None] | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes | str) -> None:
        """Queue data for the capture.

        Must be called from a running event loop.

        Raises:
            RuntimeError: If stdin has already been closed
        """
        if self._closed:
            raise RuntimeError("Cannot write to closed stdin")
        if isinstance(data, str):
            data = data.encode(self._capture.encoding)
        if self._queue is None:
            queue: asyncio.Queue[bytes | None] = asyncio.Queue()
            # Only keep the queue once a consumer is attached to it
            self._capture.attach(self._chunks(queue))
            self._queue = queue
        self._queue.put_nowait(data)

    async def close(self) -> None:
        if not self._closed:
            self._closed = True
            if self._queue is not None:
                self._queue.put_nowait(None)
        await self._capture.close()

    async def _chunks(self, queue: "asyncio.Queue[bytes | None]") -> AsyncIterator[bytes]:
        while True:
            chunk = await queue.get()
            if chunk is None:
                return
            yield chunk


class FakeProcess(Process):
    """In-memory fake process bound to a canned result.

    Tracks kill() calls for test assertions; killing never changes the exit
    code or the output.
    """

    def __init__(self, result: ProcessResult, *, capture: StreamCapture) -> None:
        """Create FakeProcess from a canned result.

        Args:
            result: Exit code and output the process reports
            capture: Receives everything written to stdin
        """
        self._exit_code = result.exit_code
        self._stdout = _single_chunk(result.stdout.encode(capture.encoding))
        self._stderr = _single_chunk(result.stderr.encode(capture.encoding))
        self._stdin = FakeStdin(capture)
        self._kill_calls: list[int] = []

    @property
    def pid(self) -> int:
        """Always FAKE_PID; not unique between processes."""
        return FAKE_PID

    @property
    def exit_code(self) -> int:
        return self._exit_code

    @property
    def stdin(self) -> FakeStdin:
        return self._stdin

    @property
    def stdout(self) -> AsyncIterator[bytes]:
        return self._stdout

    @property
    def stderr(self) -> AsyncIterator[bytes]:
        return self._stderr

    async def wait(self) -> int:
        return self._exit_code

    def kill(self, signal: int = signals.SIGTERM) -> bool:
        self._kill_calls.append(signal)
        return True

    @property
    def kill_calls(self) -> list[int]:
        """Signals passed to kill(), in order.

        This property is for test assertions only.
        """
        return list(self._kill_calls)
