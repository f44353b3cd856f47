"""Public exceptions for the Tapglue SDK."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapglue_sdk._internal.requests.models import RequestError


class TapglueError(Exception):
    """Base exception for all Tapglue SDK errors."""


class TapglueAPIError(TapglueError):
    """Error from Tapglue API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TapglueConfigError(TapglueError):
    """Configuration error (missing env vars, invalid config)."""


class TapglueValidationError(TapglueError):
    """Validation error for request/response data."""


class TapglueRequestError(TapglueError):
    """A request finished with an error outcome.

    Raised from futures handed out by ``FutureCallback``; carries the
    classified ``RequestError`` the network layer reported.
    """

    def __init__(self, error: "RequestError") -> None:
        super().__init__(error.message or error.type.value)
        self.error = error
