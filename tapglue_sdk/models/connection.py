"""Social graph connection records."""

from enum import Enum
from typing import Any

from pydantic import Field

from tapglue_sdk.exceptions import TapglueValidationError
from tapglue_sdk.models.base import WireModel
from tapglue_sdk.models.user import User


class ConnectionType(str, Enum):
    """Kind of social edge.

    ``ANY`` is a query wildcard meaning "type unconstrained". It is never
    serialized.
    """

    FOLLOW = "follow"
    FRIEND = "friend"
    ANY = "any"


class ConnectionState(str, Enum):
    """Lifecycle state of a connection."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"

    @classmethod
    def from_string(cls, value: str) -> "ConnectionState":
        """Parse a state name case-insensitively."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise TapglueValidationError(f"Unknown connection state: {value!r}") from None


class Connection(WireModel):
    """Directed edge between two users.

    On read requests ``user_from_id=None`` scopes the query to the current
    user.
    """

    user_from_id: int | None = None
    user_to_id: int | None = None
    type: ConnectionType = ConnectionType.ANY
    state: ConnectionState | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_wire(self) -> dict[str, Any]:
        data = super().to_wire()
        if self.type is ConnectionType.ANY:
            data.pop("type", None)
        return data


class ConnectionUsersList(WireModel):
    """List of users returned by connection and search queries."""

    users: list[User] = Field(default_factory=list)
    users_count: int | None = None


class PendingConnections(WireModel):
    """Incoming and outgoing connections awaiting confirmation."""

    incoming: list[Connection] = Field(default_factory=list)
    outgoing: list[Connection] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)


class SocialConnections(WireModel):
    """Connections imported from an external social platform."""

    platform: str
    platform_user_id: str
    connection_ids: list[str] = Field(default_factory=list)
    type: ConnectionType = ConnectionType.FRIEND
    state: ConnectionState | None = None
