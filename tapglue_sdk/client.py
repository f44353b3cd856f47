"""User-facing client for the Tapglue API.

Example usage:
    from tapglue_sdk import FutureCallback, TapglueClient
    from tapglue_sdk.models import LoginUser

    with TapglueClient.from_env() as client:
        callback = FutureCallback()
        client.requests.login(LoginUser(user_name="ada", password="secret"), callback)
        user = callback.future.result()

        feed_callback = FutureCallback()
        client.feed.retrieve_feed_for_current_user(feed_callback)
        feed = feed_callback.future.result()
"""

import os
from collections.abc import Callable
from concurrent.futures import Executor
from types import TracebackType

from tapglue_sdk._internal.http import DEFAULT_BASE_URL, create_http_client
from tapglue_sdk._internal.network.manager import NetworkManager
from tapglue_sdk._internal.network.queue import OfflineQueue
from tapglue_sdk._internal.requests.factory import RequestFactory
from tapglue_sdk._internal.session import Session
from tapglue_sdk.exceptions import TapglueConfigError
from tapglue_sdk.feed import FeedManager

DEFAULT_TIMEOUT_MS = 30000


class TapglueClient:
    """User-facing client for Tapglue social graph, event and feed APIs.

    Wires the HTTP client, session, network manager, request factory and feed
    manager for one application token. Use ``TapglueClient.from_env()`` to
    configure it from environment variables.
    """

    def __init__(
        self,
        app_token: str,
        *,
        base_url: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        is_online: Callable[[], bool] | None = None,
        executor: Executor | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            app_token: Application token issued by Tapglue.
            base_url: API base URL. Defaults to the public 0.4 API.
            timeout_ms: Request timeout in milliseconds.
            is_online: Connectivity probe consulted before each request.
            executor: Optional executor; requests then run off the calling thread.
            debug: Enable debug logging to stderr.

        Raises:
            TapglueConfigError: ``app_token`` is empty.
        """
        if not app_token:
            raise TapglueConfigError("An app token is required")
        self._session = Session()
        self._http = create_http_client(
            app_token,
            self._session,
            timeout=timeout_ms / 1000,
            base_url=base_url or DEFAULT_BASE_URL,
        )
        self._network = NetworkManager(
            self._http,
            self._session,
            is_online=is_online,
            executor=executor,
            queue=OfflineQueue(),
            debug=debug,
        )
        self._requests = RequestFactory(self._network, self._session, debug=debug)
        self._feed = FeedManager(self._requests)

    @classmethod
    def from_env(cls) -> "TapglueClient":
        """Create a client from environment variables.

        Required environment variables:
            TAPGLUE_APP_TOKEN: The application token.

        Optional environment variables:
            TAPGLUE_BASE_URL: API base URL.
            TAPGLUE_TIMEOUT_MS: Request timeout in milliseconds.
            TAPGLUE_DEBUG: Set to "1" to enable debug logging.

        Raises:
            TapglueConfigError: TAPGLUE_APP_TOKEN is missing.
            ValueError: TAPGLUE_TIMEOUT_MS is not an integer.
        """
        app_token = os.environ.get("TAPGLUE_APP_TOKEN")
        if not app_token:
            raise TapglueConfigError("TAPGLUE_APP_TOKEN is not set")

        base_url = os.environ.get("TAPGLUE_BASE_URL")
        debug = os.environ.get("TAPGLUE_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("TAPGLUE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(app_token, base_url=base_url, timeout_ms=timeout_ms, debug=debug)

    @property
    def requests(self) -> RequestFactory:
        """One method per API operation; outcomes arrive on callbacks."""
        return self._requests

    @property
    def feed(self) -> FeedManager:
        return self._feed

    @property
    def network(self) -> NetworkManager:
        return self._network

    @property
    def session(self) -> Session:
        return self._session

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TapglueClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
