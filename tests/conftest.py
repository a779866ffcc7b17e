import os
import threading

import pytest

from src.config import Config


class TrackedFile:
    """File wrapper that buffers writes until flush so failures can be injected."""

    def __init__(self, real, opener):
        self._real = real
        self._opener = opener
        self._pending: list[str] = []
        self._closed = False

    def write(self, text):
        if self._closed:
            raise ValueError("I/O operation on closed file.")
        self._pending.append(text)
        return len(text)

    def flush(self):
        if self._opener.take_flush_failure():
            self._pending.clear()
            raise OSError(28, "No space left on device")
        self._real.write("".join(self._pending))
        self._pending.clear()
        self._real.flush()

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        self._real.close()
        self._opener.on_close()
        if self._opener.fail_close:
            raise OSError(5, "Input/output error")


class TrackingOpener:
    """Stand-in for open() that counts handles open at the same time."""

    def __init__(self):
        self._lock = threading.Lock()
        self.open_now = 0
        self.max_open = 0
        self.opened: list[str] = []
        self.fail_next_flush = False
        self.fail_close = False

    def __call__(self, path, mode="r", **kwargs):
        real = open(path, mode, **kwargs)
        with self._lock:
            self.open_now += 1
            self.max_open = max(self.max_open, self.open_now)
            self.opened.append(os.path.basename(path))
        return TrackedFile(real, self)

    def on_close(self):
        with self._lock:
            self.open_now -= 1

    def take_flush_failure(self) -> bool:
        with self._lock:
            failed = self.fail_next_flush
            self.fail_next_flush = False
            return failed


@pytest.fixture
def opener():
    return TrackingOpener()


@pytest.fixture
def log_dir(tmp_path):
    return str(tmp_path / "logs")


@pytest.fixture
def make_config(log_dir):
    def _make(**overrides):
        values = dict(folder_path=log_dir, max_file_size_bytes=10)
        values.update(overrides)
        return Config(**values)
    return _make
