"""Event records."""

from enum import IntEnum
from typing import Any

from pydantic import Field

from tapglue_sdk.models.base import WireModel
from tapglue_sdk.models.image import Image


class EventVisibility(IntEnum):
    """Audience an event is shown to."""

    PRIVATE = 10
    CONNECTIONS = 20
    PUBLIC = 30
    GLOBAL = 40


class EventObject(WireModel):
    """Object or target an event refers to."""

    id: str | None = None
    type: str | None = None
    url: str | None = None
    display_names: dict[str, str] | None = None


class Event(WireModel):
    """User activity record.

    For lookups, ``read_object_id`` is the event id and ``read_user_id``
    selects another user's events; neither is sent.
    """

    id: int | None = None
    user_id: int | None = None
    type: str | None = None
    language: str | None = None
    priority: str | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    visibility: EventVisibility | None = None
    event_object: EventObject | None = Field(default=None, alias="object")
    target: EventObject | None = None
    tags: list[str] | None = None
    images: dict[str, Image] | None = None
    metadata: dict[str, Any] | None = None
    created_at: str | None = None
    updated_at: str | None = None

    read_object_id: int | None = Field(default=None, exclude=True)
    read_user_id: int | None = Field(default=None, exclude=True)
