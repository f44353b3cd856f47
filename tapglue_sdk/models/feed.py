"""Feed records."""

from pydantic import Field

from tapglue_sdk.models.base import WireModel
from tapglue_sdk.models.event import Event
from tapglue_sdk.models.user import User


class Feed(WireModel):
    """Ordered events plus unread annotation.

    ``is_feed`` selects the aggregated news feed (``True``) or a user's own
    events (``False``); ``unread_only`` narrows the feed to unread events.
    """

    events: list[Event] = Field(default_factory=list)
    events_count: int | None = None
    unread_events_count: int | None = None
    users: dict[str, User] | None = None

    is_feed: bool = Field(default=True, exclude=True)
    unread_only: bool = Field(default=False, exclude=True)
    read_user_id: int | None = Field(default=None, exclude=True)


class FeedCount(WireModel):
    """Unread event count of the current user's feed."""

    unread_events_count: int = 0
