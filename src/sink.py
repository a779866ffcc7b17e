"""Disk log sink: wires the submission front to the rotating writer thread."""

import logging
import queue
import threading
import time

from src.config import Config
from src.front import SubmissionFront
from src.metrics import SinkMetrics
from src.writer import RotatingWriter

logger = logging.getLogger(__name__)


class DiskLogSink:
    """Accepts (level, tag, message) from any thread and persists it asynchronously."""

    def __init__(self, config: Config, opener=None):
        self._config = config
        self._queue: queue.Queue = queue.Queue(maxsize=config.queue_size)
        self._metrics = SinkMetrics()
        self._front = SubmissionFront(self._queue, self._metrics)
        self._writer = RotatingWriter(self._queue, config, self._metrics, opener=opener)
        self._lock = threading.Lock()
        self._started = False
        self._closed = False

    @property
    def config(self) -> Config:
        return self._config

    @property
    def metrics(self) -> SinkMetrics:
        return self._metrics

    def start(self):
        with self._lock:
            if self._started or self._closed:
                return
            self._writer.start()
            self._started = True
        logger.info(
            "Disk log sink writing to %s (max %d bytes per file)",
            self._config.folder_path, self._config.max_file_size_bytes,
        )

    def submit(self, level: int, tag: str | None, message: str):
        if self._closed:
            raise RuntimeError("sink is closed")
        self._front.submit(level, tag, message)

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until every queued record has been handled. Returns False on timeout."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._queue.all_tasks_done:
            while self._queue.unfinished_tasks:
                if deadline is None:
                    self._queue.all_tasks_done.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._queue.all_tasks_done.wait(remaining)
        return True

    def close(self, timeout: float = 5.0):
        """Write out everything already queued, then stop the writer."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            started = self._started
        if started:
            deadline = time.monotonic() + timeout
            try:
                self._queue.put(None, timeout=timeout)
            except queue.Full:
                logger.warning("Writer queue still full after %.1fs, not waiting for it", timeout)
            else:
                self._writer.join(timeout=max(deadline - time.monotonic(), 0))
                if self._writer.is_alive():
                    logger.warning("Writer did not stop within %.1fs", timeout)
        stats = self._metrics.snapshot()
        logger.info(
            "Disk log sink closed: submitted=%d written=%d dropped=%d rejected=%d rotations=%d",
            stats["submitted"], stats["written"], stats["dropped"],
            stats["rejected"], stats["rotations"],
        )

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
