"""Tests for OfflineQueue."""

import pytest

from tapglue_sdk._internal.network.queue import OfflineQueue
from tapglue_sdk._internal.requests.models import Request, RequestKind
from tapglue_sdk.models import Event


def write(callback, event_type="like"):
    return Request(
        entity=Event(type=event_type), kind=RequestKind.CREATE, online_only=False, callback=callback
    )


class TestOfflineQueue:
    """Tests for FIFO behaviour and capacity."""

    def test_fifo(self, callback):
        """Should return requests in submission order."""
        queue = OfflineQueue()
        first, second = write(callback, "a"), write(callback, "b")
        queue.push(first)
        queue.push(second)

        assert len(queue) == 2
        assert queue.peek() is first
        assert queue.pop() is first
        assert queue.pop() is second
        assert queue.pop() is None

    def test_overflow_returns_dropped(self, callback):
        """Should drop and return the oldest request when full."""
        queue = OfflineQueue(max_size=2)
        first = write(callback, "a")
        queue.push(first)
        assert queue.push(write(callback, "b")) is None
        assert queue.push(write(callback, "c")) is first
        assert len(queue) == 2

    def test_clear(self, callback):
        """Should remove everything."""
        queue = OfflineQueue()
        queue.push(write(callback))
        queue.clear()
        assert len(queue) == 0
        assert queue.peek() is None

    def test_invalid_size(self):
        """Should reject a non-positive capacity."""
        with pytest.raises(ValueError):
            OfflineQueue(max_size=0)
