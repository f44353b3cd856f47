"""HTTP route table for Tapglue API requests.

Maps a request descriptor (entity type plus request kind) onto the method,
path, query and body of the API call. Paths are relative to the API base URL.
"""

from typing import Any

from pydantic import BaseModel

from tapglue_sdk._internal.requests.models import Request, RequestKind
from tapglue_sdk.exceptions import TapglueValidationError
from tapglue_sdk.models import (
    Connection,
    ConnectionType,
    ConnectionUsersList,
    Event,
    Feed,
    FeedCount,
    LoginUser,
    PendingConnections,
    SearchCriteria,
    SocialConnections,
    User,
    WireModel,
)

ANALYTICS_PATH = "analytics"

# Connection list paths keyed by type, for the current user and for another user.
_SELF_CONNECTION_PATHS: dict[ConnectionType, str] = {
    ConnectionType.ANY: "me/followers",
    ConnectionType.FOLLOW: "me/follows",
    ConnectionType.FRIEND: "me/friends",
}
_USER_CONNECTION_PATHS: dict[ConnectionType, str] = {
    ConnectionType.ANY: "users/{id}/followed",
    ConnectionType.FOLLOW: "users/{id}/follows",
    ConnectionType.FRIEND: "users/{id}/friends",
}


class Route(BaseModel):
    """Resolved HTTP call for a request."""

    method: str
    path: str
    params: dict[str, str] | None = None
    body: dict[str, Any] | None = None
    response_model: type[WireModel] | None = None

    model_config = {"frozen": True}


def resolve_route(request: Request) -> Route:
    """Resolve the HTTP call for a request descriptor.

    Raises:
        TapglueValidationError: No route exists for the entity and kind, or a
            required id is missing.
    """
    entity = request.entity
    kind = request.kind

    if kind is RequestKind.LOGOUT:
        return Route(method="DELETE", path="me/logout")
    if kind is RequestKind.LOGIN and isinstance(entity, LoginUser):
        return Route(method="POST", path="me/login", body=entity.to_wire(), response_model=User)
    if kind is RequestKind.SEARCH and isinstance(entity, SearchCriteria):
        if not entity.query:
            raise TapglueValidationError("Search query must not be empty")
        return Route(
            method="GET",
            path="users/search",
            params={"q": entity.query},
            response_model=ConnectionUsersList,
        )

    # Feed and FeedCount are checked before the generic entity branches.
    if isinstance(entity, FeedCount) and kind is RequestKind.READ:
        return Route(method="GET", path="me/feed/unread/count", response_model=FeedCount)
    if isinstance(entity, Feed) and kind is RequestKind.READ:
        return _feed_route(entity)
    if isinstance(entity, Connection):
        return _connection_route(entity, kind)
    if isinstance(entity, Event):
        return _event_route(entity, kind)
    if isinstance(entity, User):
        return _user_route(entity, kind)
    if isinstance(entity, PendingConnections) and kind is RequestKind.READ:
        return Route(method="GET", path="me/connections/pending", response_model=PendingConnections)
    if isinstance(entity, SocialConnections) and kind is RequestKind.UPDATE:
        return Route(
            method="POST",
            path="me/connections/social",
            body=entity.to_wire(),
            response_model=ConnectionUsersList,
        )

    raise _unsupported(request)


def _feed_route(feed: Feed) -> Route:
    if not feed.is_feed:
        if feed.read_user_id is None:
            return Route(method="GET", path="me/events", response_model=Feed)
        return Route(method="GET", path=f"users/{feed.read_user_id}/events", response_model=Feed)
    if feed.unread_only:
        return Route(method="GET", path="me/feed/unread", response_model=Feed)
    return Route(method="GET", path="me/feed", response_model=Feed)


def _connection_route(connection: Connection, kind: RequestKind) -> Route:
    if kind is RequestKind.CREATE:
        return Route(
            method="PUT",
            path="me/connections",
            body=connection.to_wire(),
            response_model=Connection,
        )
    if kind is RequestKind.DELETE:
        if connection.user_to_id is None or connection.type is ConnectionType.ANY:
            raise TapglueValidationError("Removing a connection requires a target user and type")
        return Route(
            method="DELETE",
            path=f"me/connections/{connection.type.value}/{connection.user_to_id}",
        )
    if kind is RequestKind.READ:
        if connection.user_from_id is None:
            path = _SELF_CONNECTION_PATHS[connection.type]
        else:
            path = _USER_CONNECTION_PATHS[connection.type].format(id=connection.user_from_id)
        return Route(method="GET", path=path, response_model=ConnectionUsersList)
    raise TapglueValidationError(f"Unsupported request: {kind.value} Connection")


def _event_route(event: Event, kind: RequestKind) -> Route:
    if kind is RequestKind.CREATE:
        return Route(method="POST", path="me/events", body=event.to_wire(), response_model=Event)
    if kind is RequestKind.UPDATE:
        if event.id is None:
            raise TapglueValidationError("Updating an event requires its id")
        return Route(
            method="PUT",
            path=f"me/events/{event.id}",
            body=event.to_wire(),
            response_model=Event,
        )

    event_id = event.read_object_id if event.read_object_id is not None else event.id
    if event_id is None:
        raise TapglueValidationError(f"{kind.value} Event requires an event id")
    if kind is RequestKind.DELETE:
        return Route(method="DELETE", path=f"me/events/{event_id}")
    if kind is RequestKind.READ:
        if event.read_user_id is None:
            return Route(method="GET", path=f"me/events/{event_id}", response_model=Event)
        return Route(
            method="GET",
            path=f"users/{event.read_user_id}/events/{event_id}",
            response_model=Event,
        )
    raise TapglueValidationError(f"Unsupported request: {kind.value} Event")


def _user_route(user: User, kind: RequestKind) -> Route:
    if kind is RequestKind.CREATE:
        return Route(method="POST", path="users", body=user.to_wire(), response_model=User)
    if kind is RequestKind.UPDATE:
        return Route(method="PUT", path="me", body=user.to_wire(), response_model=User)
    if kind is RequestKind.DELETE:
        return Route(method="DELETE", path="me")
    if kind is RequestKind.READ:
        if user.read_object_id is None:
            raise TapglueValidationError("Reading a user requires a user id")
        return Route(method="GET", path=f"users/{user.read_object_id}", response_model=User)
    raise TapglueValidationError(f"Unsupported request: {kind.value} User")


def _unsupported(request: Request) -> TapglueValidationError:
    entity_name = type(request.entity).__name__ if request.entity is not None else "None"
    return TapglueValidationError(f"Unsupported request: {request.kind.value} {entity_name}")
