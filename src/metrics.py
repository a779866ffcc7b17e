"""Thread-safe counters for the sink's diagnostic channel."""

import threading


class SinkMetrics:
    """Counters updated by producers (submitted/rejected) and the writer (the rest)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._submitted = 0
        self._rejected = 0
        self._written = 0
        self._dropped = 0
        self._bytes_written = 0
        self._rotations = 0

    def record_submitted(self):
        with self._lock:
            self._submitted += 1

    def retract_submitted(self):
        """Undo a submitted count for a record that never reached the queue."""
        with self._lock:
            self._submitted -= 1

    def record_rejected(self):
        """Record a submission refused because the queue was full."""
        with self._lock:
            self._rejected += 1

    def record_written(self, nbytes: int):
        """Record a record appended and flushed."""
        with self._lock:
            self._written += 1
            self._bytes_written += nbytes

    def record_dropped(self):
        """Record a record lost to a write failure."""
        with self._lock:
            self._dropped += 1

    def record_rotation(self):
        with self._lock:
            self._rotations += 1

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "submitted": self._submitted,
                "rejected": self._rejected,
                "written": self._written,
                "dropped": self._dropped,
                "bytes_written": self._bytes_written,
                "rotations": self._rotations,
            }
