"""In-memory FIFO of writes waiting for connectivity."""

import threading
from collections import deque

from tapglue_sdk._internal.requests.models import Request

DEFAULT_MAX_SIZE = 256


class OfflineQueue:
    """Pending cache-eligible requests in submission order.

    When ``max_size`` is exceeded the oldest request is dropped.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._items: deque[Request] = deque()
        self._max_size = max_size
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, request: Request) -> Request | None:
        """Append a request; returns the request dropped to make room, if any."""
        with self._lock:
            dropped = None
            if len(self._items) >= self._max_size:
                dropped = self._items.popleft()
            self._items.append(request)
            return dropped

    def peek(self) -> Request | None:
        with self._lock:
            return self._items[0] if self._items else None

    def pop(self) -> Request | None:
        with self._lock:
            return self._items.popleft() if self._items else None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
