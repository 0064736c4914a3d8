"""Capture of byte streams as decoded text.

StreamCapture consumes byte-chunk streams, decodes every chunk and hands the
text to a callback. close() resolves only once every attached stream has been
fully consumed, which gives tests a deterministic point after which all
written input has been observed.
"""

import asyncio
import logging
from collections.abc import AsyncIterable, Callable

from procfake.errors import DecodeError

logger = logging.getLogger(__name__)

TextReceivedCallback = Callable[[str], None]


class StreamCapture:
    """Decodes attached byte streams and forwards the text to a callback.

    The callback runs synchronously for each chunk, in the order chunks
    arrive on a stream. A chunk that cannot be decoded ends its stream and
    is reported as DecodeError from close().
    """

    def __init__(self, on_text: TextReceivedCallback | None, *, encoding: str = "utf-8") -> None:
        """Create a capture.

        Args:
            on_text: Called with the decoded text of every chunk. If None the
                text is decoded and dropped.
            encoding: Codec used to decode chunks
        """
        self._on_text = on_text
        self._encoding = encoding
        self._attachments: list[asyncio.Task[None]] = []

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def pending(self) -> int:
        """Number of attached streams not yet collected by close()."""
        return len(self._attachments)

    def attach(self, chunks: AsyncIterable[bytes]) -> asyncio.Task[None]:
        """Start consuming a stream of byte chunks.

        Must be called from a running event loop. Returns as soon as the
        consumer is scheduled.

        Returns:
            Task that completes when the stream is exhausted
        """
        task = asyncio.get_running_loop().create_task(self._consume(chunks))
        self._attachments.append(task)
        return task

    async def close(self) -> None:
        """Wait for every attached stream to finish, then reset.

        Raises:
            DecodeError: If any attached stream delivered undecodable bytes
        """
        attachments = self._attachments
        self._attachments = []
        outcomes = await asyncio.gather(*attachments, return_exceptions=True)
        logger.debug("Closed capture after %d stream(s)", len(attachments))
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome

    async def _consume(self, chunks: AsyncIterable[bytes]) -> None:
        async for chunk in chunks:
            self._deliver(chunk)

    def _deliver(self, chunk: bytes) -> None:
        try:
            text = chunk.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(chunk, encoding=self._encoding) from e
        logger.debug("Captured %d byte chunk", len(chunk))
        if self._on_text is not None:
            self._on_text(text)
