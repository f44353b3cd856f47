"""Pydantic models for request descriptors and error outcomes."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from tapglue_sdk.models.base import WireModel

# =============================================================================
# Request Kinds
# =============================================================================


class RequestKind(str, Enum):
    """Classification of a request descriptor."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LOGIN = "login"
    LOGOUT = "logout"
    SEARCH = "search"


# =============================================================================
# Errors
# =============================================================================


class RequestErrorType(str, Enum):
    """Error classification delivered to ``on_request_error``."""

    USER_NOT_LOGGED_IN = "user_not_logged_in"
    NO_NETWORK = "no_network"
    SERVER_ERROR = "server_error"
    UNSUPPORTED_INPUT = "unsupported_input"
    UNKNOWN_ERROR = "unknown_error"


class RequestError(BaseModel):
    """Error outcome of a request.

    Required fields:
        type: Error classification

    Optional fields:
        message: Human-readable description
        status_code: HTTP status for SERVER_ERROR outcomes
        server_errors: Messages from the API error body
    """

    type: RequestErrorType
    message: str | None = None
    status_code: int | None = None
    server_errors: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


# =============================================================================
# Request Descriptor
# =============================================================================


class Request(BaseModel):
    """Envelope executed by the network manager.

    Pairs an entity carrying parameters or payload with the request kind, the
    online-only flag and the completion callback. Immutable once built.
    """

    entity: WireModel | None
    kind: RequestKind
    online_only: bool
    callback: Any  # RequestCallback

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def entity_required(self) -> "Request":
        if self.entity is None and self.kind is not RequestKind.LOGOUT:
            raise ValueError(f"{self.kind.value} request requires an entity")
        return self

    def describe(self) -> dict[str, Any]:
        """Summary used in debug output."""
        return {
            "kind": self.kind.value,
            "entity": type(self.entity).__name__ if self.entity is not None else None,
            "online_only": self.online_only,
        }
