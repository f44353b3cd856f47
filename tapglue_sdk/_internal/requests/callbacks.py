"""Completion callbacks for request descriptors."""

import sys
import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from tapglue_sdk.exceptions import TapglueRequestError

if TYPE_CHECKING:
    from tapglue_sdk._internal.requests.models import RequestError


@runtime_checkable
class RequestCallback(Protocol):
    """Receives exactly one outcome of a request."""

    def on_request_finished(self, output: Any, changed_online: bool) -> None:
        """Called with the typed result.

        ``changed_online`` is False when a write was queued for later
        delivery instead of reaching the server.
        """

    def on_request_error(self, error: "RequestError") -> None:
        """Called with the error classification."""


class FunctionCallback:
    """Adapts a pair of plain callables to ``RequestCallback``."""

    def __init__(
        self,
        on_success: Callable[[Any, bool], None],
        on_error: Callable[["RequestError"], None],
    ) -> None:
        self._on_success = on_success
        self._on_error = on_error

    def on_request_finished(self, output: Any, changed_online: bool) -> None:
        self._on_success(output, changed_online)

    def on_request_error(self, error: "RequestError") -> None:
        self._on_error(error)


class FutureCallback:
    """Resolves a future with the request outcome.

    Success sets the typed result; an error sets ``TapglueRequestError``.

    Example:
        callback = FutureCallback()
        client.requests.get_feed(callback)
        feed = callback.future.result(timeout=5)
    """

    def __init__(self) -> None:
        self.future: Future[Any] = Future()
        self.changed_online: bool | None = None

    def on_request_finished(self, output: Any, changed_online: bool) -> None:
        self.changed_online = changed_online
        self.future.set_result(output)

    def on_request_error(self, error: "RequestError") -> None:
        self.future.set_exception(TapglueRequestError(error))


class OnceCallback:
    """Forwards only the first outcome to the wrapped callback."""

    def __init__(self, callback: RequestCallback, *, debug: bool = False) -> None:
        self._callback = callback
        self._debug = debug
        self._lock = threading.Lock()
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def _claim(self) -> bool:
        with self._lock:
            if self._fired:
                return False
            self._fired = True
            return True

    def _log_debug(self, message: str) -> None:
        if self._debug:
            print(f"[tapglue-sdk:callback] {message}", file=sys.stderr)

    def on_request_finished(self, output: Any, changed_online: bool) -> None:
        if not self._claim():
            self._log_debug("Dropping duplicate success outcome")
            return
        self._callback.on_request_finished(output, changed_online)

    def on_request_error(self, error: "RequestError") -> None:
        if not self._claim():
            self._log_debug(f"Dropping duplicate error outcome: {error.type.value}")
            return
        self._callback.on_request_error(error)
