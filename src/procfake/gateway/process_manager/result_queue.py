"""Per-command FIFO queues of canned process results."""

import logging
from collections import deque
from collections.abc import Mapping, Sequence

from procfake.errors import ConfigurationError
from procfake.gateway.process_manager.types import ProcessResult

logger = logging.getLogger(__name__)


class ResultQueue:
    """Canned results keyed by command line, consumed in order.

    Each result is handed out at most once. Asking for a command that was
    never registered, or whose results have all been consumed, raises
    ConfigurationError: the test did not provide enough results.
    """

    def __init__(self) -> None:
        self._results: dict[str, deque[ProcessResult]] = {}

    def register(self, results: Mapping[str, Sequence[str]]) -> None:
        """Replace all queues with the given stdout texts.

        Args:
            results: Mapping of command line to the stdout of each successive
                call. Every text becomes a result with exit code 0 and empty
                stderr.
        """
        self._results = {
            key: deque(ProcessResult(pid=0, exit_code=0, stdout=text, stderr="") for text in texts)
            for key, texts in results.items()
        }
        logger.debug("Registered results for %d command(s)", len(self._results))

    def pop(self, key: str) -> ProcessResult:
        """Remove and return the next result for a command line.

        Raises:
            ConfigurationError: If the command line has no results left
        """
        queue = self._results.get(key)
        if queue is None:
            raise ConfigurationError(key, registered=self.keys, exhausted=False)
        if not queue:
            raise ConfigurationError(key, registered=self.keys, exhausted=True)
        result = queue.popleft()
        logger.debug("Popped result for '%s' (%d left)", key, len(queue))
        return result

    def remaining(self, key: str) -> int:
        """Number of results still queued for a command line."""
        queue = self._results.get(key)
        return len(queue) if queue is not None else 0

    @property
    def keys(self) -> list[str]:
        return list(self._results)
