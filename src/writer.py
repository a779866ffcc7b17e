"""Rotating writer: the single consumer thread that appends queued records to disk."""

import logging
import queue
from threading import Thread

from src.config import Config
from src.errors import WriteFailure
from src.metrics import SinkMetrics
from src.models import LogRecord, level_name
from src.selection import select_log_file

logger = logging.getLogger(__name__)


class RotatingWriter(Thread):
    """Drains the queue in order, appending each message to the current log file.

    Owns the only open file handle. A None item on the queue stops the thread
    once everything queued before it has been written.
    """

    def __init__(self, q: queue.Queue, config: Config,
                 metrics: SinkMetrics | None = None, opener=None):
        super().__init__(daemon=True, name="disk-log-writer")
        self._queue = q
        self._config = config
        self._metrics = metrics or SinkMetrics()
        self._opener = opener or open
        self._file = None
        self._path: str | None = None
        self._bytes_written = 0

    @property
    def current_path(self) -> str | None:
        """Path of the open log file, or None between files."""
        return self._path if self._file is not None else None

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    def run(self):
        while True:
            record = self._queue.get()
            try:
                if record is None:
                    self._release_file()
                    return
                self.handle(record)
            finally:
                self._queue.task_done()

    def handle(self, record: LogRecord):
        """Write one record, rotating afterwards if the file reached its limit."""
        try:
            nbytes = self._append(record.message)
        except Exception as e:
            logger.warning(
                "Dropped %s record (tag=%s): %s: %s",
                level_name(record.level), record.tag, type(e).__name__, e,
            )
            self._metrics.record_dropped()
            self._release_file()
            return

        self._metrics.record_written(nbytes)
        if self._bytes_written >= self._config.max_file_size_bytes:
            logger.info("Rotating %s at %d bytes", self._path, self._bytes_written)
            self._metrics.record_rotation()
            self._release_file()

    def _append(self, content: str) -> int:
        try:
            if self._file is None:
                self._open_next()
            nbytes = len(content.encode(self._config.encoding))
            self._file.write(content)
            self._bytes_written += nbytes
            self._file.flush()
        except (OSError, ValueError) as e:
            target = self._path or self._config.folder_path
            raise WriteFailure(f"{target}: {e}") from e
        return nbytes

    def _open_next(self):
        path, size = select_log_file(
            self._config.folder_path,
            self._config.base_name,
            self._config.extension,
            self._config.max_file_size_bytes,
        )
        self._path = path
        # newline="" keeps the on-disk bytes identical to the submitted text
        self._file = self._opener(path, "a", encoding=self._config.encoding, newline="")
        self._bytes_written = size
        logger.debug("Opened %s (%d bytes already present)", path, size)

    def _release_file(self):
        """Close the open file, if any, and return to the no-file state."""
        f = self._file
        self._file = None
        self._path = None
        self._bytes_written = 0
        if f is None:
            return
        try:
            f.close()
        except Exception as e:
            logger.debug("Ignoring error while closing log file: %s", e)
