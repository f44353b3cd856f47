"""Public Pydantic models for the Tapglue API.

Each model mirrors a wire payload; use ``to_wire()`` / ``from_wire()`` to
convert between entities and JSON keyed by wire field names.
"""

from tapglue_sdk.models.base import WireModel
from tapglue_sdk.models.connection import (
    Connection,
    ConnectionState,
    ConnectionType,
    ConnectionUsersList,
    PendingConnections,
    SocialConnections,
)
from tapglue_sdk.models.event import Event, EventObject, EventVisibility
from tapglue_sdk.models.feed import Feed, FeedCount
from tapglue_sdk.models.image import Image
from tapglue_sdk.models.search import SearchCriteria
from tapglue_sdk.models.user import LoginUser, User

__all__ = [
    "WireModel",
    "Connection",
    "ConnectionState",
    "ConnectionType",
    "ConnectionUsersList",
    "PendingConnections",
    "SocialConnections",
    "Event",
    "EventObject",
    "EventVisibility",
    "Feed",
    "FeedCount",
    "Image",
    "SearchCriteria",
    "LoginUser",
    "User",
]
