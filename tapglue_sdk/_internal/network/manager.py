"""Network manager: executes request descriptors against the Tapglue API."""

import json
import sys
import threading
from collections.abc import Callable
from concurrent.futures import Executor
from typing import Any

import httpx
from pydantic import ValidationError

from tapglue_sdk._internal.network.queue import OfflineQueue
from tapglue_sdk._internal.network.routes import ANALYTICS_PATH, Route, resolve_route
from tapglue_sdk._internal.redaction import redact_payload
from tapglue_sdk._internal.requests.callbacks import OnceCallback
from tapglue_sdk._internal.requests.models import (
    Request,
    RequestError,
    RequestErrorType,
    RequestKind,
)
from tapglue_sdk._internal.session import Session
from tapglue_sdk.exceptions import TapglueValidationError
from tapglue_sdk.models import User


def _always_online() -> bool:
    return True


class NetworkManager:
    """Executes request descriptors and reports exactly one outcome each.

    Online-only requests fail with NO_NETWORK when the device is offline or
    the transport fails. Cache-eligible writes are queued instead and
    reported as finished with ``changed_online=False``; ``flush_queue()``
    delivers them later in submission order.

    With an ``executor`` the I/O runs off the calling thread; without one
    requests execute inline.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        session: Session,
        *,
        is_online: Callable[[], bool] | None = None,
        executor: Executor | None = None,
        queue: OfflineQueue | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the network manager.

        Args:
            http_client: Configured client, see ``create_http_client``.
            session: Session updated by login, logout and user writes.
            is_online: Connectivity probe. Defaults to always online.
            executor: Optional executor for off-thread execution.
            queue: Offline queue for cache-eligible writes.
            debug: Enable debug logging to stderr.
        """
        self._http = http_client
        self._session = session
        self._is_online = is_online or _always_online
        self._executor = executor
        self._queue = queue if queue is not None else OfflineQueue()
        self._debug = debug
        self._flush_lock = threading.Lock()

    @property
    def queue(self) -> OfflineQueue:
        return self._queue

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[tapglue-sdk:network] {message}", file=sys.stderr)

    # =========================================================================
    # Request Execution
    # =========================================================================

    def perform_request(self, request: Request) -> None:
        """Execute a request descriptor.

        Exactly one of the request callback's outcomes fires, either inline
        or on the executor.
        """
        callback = OnceCallback(request.callback, debug=self._debug)
        try:
            route = resolve_route(request)
        except TapglueValidationError as e:
            self._log_debug(f"Unsupported request {request.describe()}: {e}")
            callback.on_request_error(
                RequestError(type=RequestErrorType.UNSUPPORTED_INPUT, message=str(e))
            )
            return

        if self._executor is None:
            self._run(request, route, callback)
        else:
            self._executor.submit(self._run, request, route, callback)

    def _run(self, request: Request, route: Route, callback: OnceCallback) -> None:
        """Execute a request, reporting anything unexpected as UNKNOWN_ERROR."""
        try:
            self._execute(request, route, callback)
        except Exception as e:
            self._log_debug(f"Unexpected error for {route.method} {route.path}: {e!r}")
            callback.on_request_error(
                RequestError(type=RequestErrorType.UNKNOWN_ERROR, message=str(e) or repr(e))
            )

    def _execute(self, request: Request, route: Route, callback: OnceCallback) -> None:
        if not self._is_online():
            self._log_debug(f"Offline, not sending {route.method} {route.path}")
            self._handle_unreachable(request, callback)
            return

        try:
            response = self._send(route)
        except httpx.HTTPError as e:
            # redirect loops and undecodable bodies count as unreachable too
            self._log_debug(f"HTTP error for {route.method} {route.path}: {e!r}")
            self._handle_unreachable(request, callback)
            return

        if not response.is_success:
            callback.on_request_error(self._server_error(response))
            return

        try:
            result = self._parse(route, response)
        except (ValidationError, ValueError) as e:
            self._log_debug(f"Unparseable response for {route.path}: {e}")
            callback.on_request_error(
                RequestError(
                    type=RequestErrorType.UNKNOWN_ERROR,
                    message=f"Unexpected response: {e}",
                    status_code=response.status_code,
                )
            )
            return

        self._apply_session_effects(request, result)
        callback.on_request_finished(result, True)

    def _handle_unreachable(self, request: Request, callback: OnceCallback) -> None:
        if request.online_only:
            callback.on_request_error(
                RequestError(
                    type=RequestErrorType.NO_NETWORK,
                    message=f"{request.kind.value} request requires a network connection",
                )
            )
            return

        dropped = self._queue.push(request)
        if dropped is not None:
            self._log_debug(f"Offline queue full, dropped {dropped.describe()}")
        self._log_debug(f"Queued {request.describe()} ({len(self._queue)} pending)")
        callback.on_request_finished(request.entity, False)

    def _send(self, route: Route) -> httpx.Response:
        """Send the HTTP call for a route."""
        if route.body is not None:
            self._log_debug(
                f"{route.method} {route.path} body={json.dumps(redact_payload(route.body), default=str)}"
            )
        else:
            self._log_debug(f"{route.method} {route.path}")
        response = self._http.request(
            route.method,
            route.path,
            params=route.params,
            json=route.body,
        )
        self._log_debug(f"{route.method} {route.path} -> {response.status_code}")
        return response

    def _parse(self, route: Route, response: httpx.Response) -> Any:
        if route.response_model is None or not response.content:
            return None
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return route.response_model.from_wire(data)

    def _server_error(self, response: httpx.Response) -> RequestError:
        """Classify a non-2xx response."""
        messages: list[str] = []
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            for item in data.get("errors") or []:
                if isinstance(item, dict) and item.get("message"):
                    messages.append(str(item["message"]))
                elif isinstance(item, str):
                    messages.append(item)
        self._log_debug(f"Server error {response.status_code}: {messages}")
        return RequestError(
            type=RequestErrorType.SERVER_ERROR,
            message=messages[0] if messages else f"HTTP {response.status_code}",
            status_code=response.status_code,
            server_errors=messages,
        )

    def _apply_session_effects(self, request: Request, result: Any) -> None:
        if request.kind is RequestKind.LOGIN and isinstance(result, User):
            self._session.start(result)
        elif request.kind is RequestKind.LOGOUT:
            self._session.clear()
        elif request.kind is RequestKind.DELETE and isinstance(request.entity, User):
            self._session.clear()
        elif request.kind is RequestKind.UPDATE and isinstance(result, User):
            self._session.refresh_user(result)

    # =========================================================================
    # Offline Queue
    # =========================================================================

    def flush_queue(self) -> int:
        """Deliver queued writes in submission order.

        Stops at the first HTTP failure, leaving that request and the rest
        queued. Requests rejected by the server are dropped. Only one flush
        runs at a time; a call made while another is in progress returns 0
        without sending anything.

        Returns:
            Number of requests the server accepted.
        """
        if not self._flush_lock.acquire(blocking=False):
            self._log_debug("Flush already in progress")
            return 0
        try:
            return self._flush_locked()
        finally:
            self._flush_lock.release()

    def _flush_locked(self) -> int:
        delivered = 0
        while True:
            request = self._queue.peek()
            if request is None or not self._is_online():
                break
            try:
                route = resolve_route(request)
                response = self._send(route)
            except httpx.HTTPError as e:
                self._log_debug(f"Flush stopped, HTTP error: {e!r}")
                break
            except TapglueValidationError as e:
                self._log_debug(f"Dropping unroutable queued request: {e}")
                self._queue.pop()
                continue

            self._queue.pop()
            if not response.is_success:
                self._log_debug(f"Dropping queued {request.describe()}, status {response.status_code}")
                continue
            try:
                result = self._parse(route, response)
            except ValueError:
                result = None
            self._apply_session_effects(request, result)
            delivered += 1
        return delivered

    # =========================================================================
    # Analytics
    # =========================================================================

    def send_analytics(self) -> bool:
        """Send the analytics ping.

        Best-effort: returns False on any error and never raises.
        """
        if not self._is_online():
            self._log_debug("Offline, skipping analytics")
            return False
        try:
            response = self._http.post(ANALYTICS_PATH)
            if response.is_success:
                self._log_debug("Analytics sent")
                return True
            self._log_debug(f"Analytics failed with status {response.status_code}")
            return False
        except httpx.TimeoutException:
            self._log_debug("Analytics timed out")
            return False
        except Exception as e:
            self._log_debug(f"Analytics error: {e}")
            return False
