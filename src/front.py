"""Submission front: validates a record and hands it to the writer queue."""

import queue

from src.errors import InvalidArgumentError
from src.metrics import SinkMetrics
from src.models import LogRecord


class SubmissionFront:
    """Callable from any thread. Never blocks and never touches the disk."""

    def __init__(self, q: queue.Queue, metrics: SinkMetrics | None = None):
        self._queue = q
        self._metrics = metrics or SinkMetrics()

    def submit(self, level: int, tag: str | None, message: str):
        if message is None:
            raise InvalidArgumentError("message must not be None")
        if not isinstance(message, str):
            raise InvalidArgumentError(
                f"message must be a str, got {type(message).__name__}"
            )

        # submitted is counted before the writer can see the record
        self._metrics.record_submitted()
        try:
            self._queue.put_nowait(LogRecord(level=level, tag=tag, message=message))
        except queue.Full:
            self._metrics.retract_submitted()
            self._metrics.record_rejected()
