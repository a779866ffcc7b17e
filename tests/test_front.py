"""Tests for the submission front."""

import queue

import pytest

from src.errors import InvalidArgumentError
from src.front import SubmissionFront
from src.metrics import SinkMetrics
from src.models import DEBUG, LogRecord


class TestSubmit:
    def test_enqueues_record(self):
        q = queue.Queue()
        SubmissionFront(q).submit(DEBUG, "net", "hello\n")
        assert q.get_nowait() == LogRecord(level=DEBUG, tag="net", message="hello\n")

    def test_tag_and_level_unconstrained(self):
        q = queue.Queue()
        front = SubmissionFront(q)
        front.submit(-42, None, "x")
        front.submit(10_000, "", "y")
        assert [q.get_nowait().message for _ in range(2)] == ["x", "y"]

    def test_preserves_submission_order(self):
        q = queue.Queue()
        front = SubmissionFront(q)
        for i in range(50):
            front.submit(DEBUG, None, str(i))
        assert [q.get_nowait().message for _ in range(50)] == [str(i) for i in range(50)]

    def test_none_message_rejected(self):
        q = queue.Queue()
        metrics = SinkMetrics()
        with pytest.raises(InvalidArgumentError):
            SubmissionFront(q, metrics).submit(DEBUG, "tag", None)
        assert q.empty()
        assert metrics.snapshot()["submitted"] == 0

    def test_non_string_message_rejected(self):
        q = queue.Queue()
        with pytest.raises(InvalidArgumentError):
            SubmissionFront(q).submit(DEBUG, "tag", b"bytes")
        assert q.empty()

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            SubmissionFront(queue.Queue()).submit(DEBUG, None, None)

    def test_full_queue_drops_without_blocking(self):
        q = queue.Queue(maxsize=1)
        metrics = SinkMetrics()
        front = SubmissionFront(q, metrics)
        front.submit(DEBUG, None, "first")
        front.submit(DEBUG, None, "second")

        assert q.qsize() == 1
        assert q.get_nowait().message == "first"
        stats = metrics.snapshot()
        assert stats["submitted"] == 1
        assert stats["rejected"] == 1


    def test_counted_as_submitted_before_enqueue(self):
        metrics = SinkMetrics()
        seen = []

        class RecordingQueue(queue.Queue):
            def put_nowait(self, item):
                seen.append(metrics.snapshot()["submitted"])
                super().put_nowait(item)

        front = SubmissionFront(RecordingQueue(), metrics)
        front.submit(DEBUG, None, "one")
        front.submit(DEBUG, None, "two")
        assert seen == [1, 2]
        assert metrics.snapshot()["submitted"] == 2


def test_record_is_immutable():
    record = LogRecord(level=DEBUG, tag=None, message="m")
    with pytest.raises(AttributeError):
        record.message = "changed"
