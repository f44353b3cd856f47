"""Shared HTTP client configuration."""

from collections.abc import Generator

import httpx

from tapglue_sdk._internal.session import Session
from tapglue_sdk._version import __version__

DEFAULT_BASE_URL = "https://api.tapglue.com/0.4/"
DEFAULT_TIMEOUT = 30.0


class SessionAuth(httpx.Auth):
    """Basic auth with the app token as user name and the session token as password.

    The password is read from the session on every request so login and
    logout take effect without rebuilding the client.
    """

    def __init__(self, app_token: str, session: Session) -> None:
        self._app_token = app_token
        self._session = session

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        basic = httpx.BasicAuth(self._app_token, self._session.session_token or "")
        yield from basic.auth_flow(request)


def create_http_client(
    app_token: str,
    session: Session,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        app_token: Application token issued by Tapglue.
        session: Session supplying the current session token.
        timeout: Request timeout in seconds.
        base_url: Base URL for all requests; relative routes resolve against it.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or DEFAULT_BASE_URL,
        auth=SessionAuth(app_token, session),
        headers={
            "User-Agent": f"tapglue-sdk/{__version__}",
            "Accept": "application/json",
        },
    )
