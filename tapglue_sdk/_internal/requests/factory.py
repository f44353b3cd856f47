"""Request factory: one method per Tapglue operation."""

import sys
from typing import TYPE_CHECKING

from tapglue_sdk._internal.requests.callbacks import RequestCallback
from tapglue_sdk._internal.requests.models import (
    Request,
    RequestError,
    RequestErrorType,
    RequestKind,
)
from tapglue_sdk._internal.session import Session
from tapglue_sdk.exceptions import TapglueValidationError
from tapglue_sdk.models import (
    Connection,
    ConnectionState,
    ConnectionType,
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

if TYPE_CHECKING:
    from tapglue_sdk._internal.network.manager import NetworkManager


class RequestFactory:
    """Translates SDK operations into request descriptors.

    Each method builds the entity for the call, wraps it in a ``Request`` with
    the right kind and online-only flag, and hands it to the network manager.
    Outcomes arrive on the callback; no method raises for request failures.

    Social edge writes are cache-eligible (``online_only=False``) and may be
    queued while offline. Reads, searches, login/logout and account
    creation/removal must reach the server.

    Operations on the current user's connections require a logged-in session.
    Without one the callback receives USER_NOT_LOGGED_IN synchronously and the
    network manager is not called.
    """

    def __init__(
        self,
        network_manager: "NetworkManager",
        session: Session,
        *,
        debug: bool = False,
    ) -> None:
        self._network = network_manager
        self._session = session
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[tapglue-sdk:requests] {message}", file=sys.stderr)

    def _submit(
        self,
        entity: WireModel | None,
        kind: RequestKind,
        online_only: bool,
        callback: RequestCallback,
    ) -> None:
        self._network.perform_request(
            Request(entity=entity, kind=kind, online_only=online_only, callback=callback)
        )

    def _current_user_id(self, callback: RequestCallback) -> int | None:
        """Return the logged-in user's id, or report USER_NOT_LOGGED_IN."""
        user = self._session.current_user
        if user is None or user.id is None:
            self._log_debug("No current user, rejecting request")
            callback.on_request_error(
                RequestError(
                    type=RequestErrorType.USER_NOT_LOGGED_IN,
                    message="A logged in user is required",
                )
            )
            return None
        return user.id

    # =========================================================================
    # Connections
    # =========================================================================

    def confirm_connection(
        self, user_id: int, connection_type: ConnectionType, callback: RequestCallback
    ) -> None:
        """Confirm a connection with ``user_id``."""
        self._write_connection(user_id, connection_type, ConnectionState.CONFIRMED, callback)

    def reject_connection(
        self, user_id: int, connection_type: ConnectionType, callback: RequestCallback
    ) -> None:
        """Reject a connection request from ``user_id``."""
        self._write_connection(user_id, connection_type, ConnectionState.REJECTED, callback)

    def create_connection(
        self,
        user_id: int,
        connection_type: ConnectionType,
        state: str,
        callback: RequestCallback,
    ) -> None:
        """Create a connection to ``user_id`` in the given state.

        Args:
            user_id: Target user.
            connection_type: FOLLOW or FRIEND.
            state: State name, e.g. "pending" or "confirmed".
            callback: Receives the created Connection.
        """
        self._write_connection(user_id, connection_type, state, callback)

    def _write_connection(
        self,
        user_id: int,
        connection_type: ConnectionType,
        state: ConnectionState | str,
        callback: RequestCallback,
    ) -> None:
        current_user_id = self._current_user_id(callback)
        if current_user_id is None:
            return
        try:
            if connection_type is ConnectionType.ANY:
                raise TapglueValidationError("Connection writes need a FOLLOW or FRIEND type")
            if not isinstance(state, ConnectionState):
                state = ConnectionState.from_string(state)
        except TapglueValidationError as e:
            self._log_debug(f"Rejecting connection write: {e}")
            callback.on_request_error(
                RequestError(type=RequestErrorType.UNSUPPORTED_INPUT, message=str(e))
            )
            return
        connection = Connection(
            user_from_id=current_user_id,
            user_to_id=user_id,
            type=connection_type,
            state=state,
        )
        self._submit(connection, RequestKind.CREATE, False, callback)

    def remove_connection(
        self, user_id: int, connection_type: ConnectionType, callback: RequestCallback
    ) -> None:
        """Remove (cancel) the connection with ``user_id``."""
        current_user_id = self._current_user_id(callback)
        if current_user_id is None:
            return
        connection = Connection(
            user_from_id=current_user_id,
            user_to_id=user_id,
            type=connection_type,
        )
        self._submit(connection, RequestKind.DELETE, False, callback)

    def create_pending_connections_request(self, callback: RequestCallback) -> None:
        """Fetch connections awaiting confirmation."""
        self._submit(PendingConnections(), RequestKind.READ, True, callback)

    def social_connections(self, social_data: SocialConnections, callback: RequestCallback) -> None:
        """Import connections from an external platform."""
        self._submit(social_data, RequestKind.UPDATE, True, callback)

    def get_current_user_followed(self, callback: RequestCallback) -> None:
        self._read_connections(None, ConnectionType.FOLLOW, callback)

    def get_current_user_followers(self, callback: RequestCallback) -> None:
        self._read_connections(None, ConnectionType.ANY, callback)

    def get_current_user_friends(self, callback: RequestCallback) -> None:
        self._read_connections(None, ConnectionType.FRIEND, callback)

    def get_user_followed(self, user_id: int, callback: RequestCallback) -> None:
        self._read_connections(user_id, ConnectionType.FOLLOW, callback)

    def get_user_followers(self, user_id: int, callback: RequestCallback) -> None:
        self._read_connections(user_id, ConnectionType.ANY, callback)

    def get_user_friends(self, user_id: int, callback: RequestCallback) -> None:
        self._read_connections(user_id, ConnectionType.FRIEND, callback)

    def _read_connections(
        self,
        user_id: int | None,
        connection_type: ConnectionType,
        callback: RequestCallback,
    ) -> None:
        # user_from_id=None scopes the query to the current user
        connection = Connection(user_from_id=user_id, type=connection_type)
        self._submit(connection, RequestKind.READ, True, callback)

    # =========================================================================
    # Events and Feed
    # =========================================================================

    def create_event(self, event: Event, callback: RequestCallback) -> None:
        self._submit(event, RequestKind.CREATE, False, callback)

    def update_event(self, event: Event, callback: RequestCallback) -> None:
        self._submit(event, RequestKind.UPDATE, False, callback)

    def remove_event(self, event_id: int, callback: RequestCallback) -> None:
        self._submit(Event(read_object_id=event_id), RequestKind.DELETE, False, callback)

    def get_event(
        self,
        event_id: int,
        callback: RequestCallback,
        *,
        user_id: int | None = None,
    ) -> None:
        """Fetch one event of the current user, or of ``user_id`` when given."""
        event = Event(read_object_id=event_id, read_user_id=user_id)
        self._submit(event, RequestKind.READ, True, callback)

    def get_events(self, callback: RequestCallback, *, user_id: int | None = None) -> None:
        """Fetch all events of the current user, or of ``user_id`` when given."""
        self._submit(Feed(is_feed=False, read_user_id=user_id), RequestKind.READ, True, callback)

    def get_feed(self, callback: RequestCallback) -> None:
        self._submit(Feed(is_feed=True), RequestKind.READ, True, callback)

    def get_unread_feed(self, callback: RequestCallback) -> None:
        self._submit(Feed(is_feed=True, unread_only=True), RequestKind.READ, True, callback)

    def get_feed_count(self, callback: RequestCallback) -> None:
        self._submit(FeedCount(), RequestKind.READ, True, callback)

    # =========================================================================
    # Users and Session
    # =========================================================================

    def create_user(self, user: User, callback: RequestCallback) -> None:
        """Register a new user. Never queued: accounts are not created offline."""
        self._submit(user, RequestKind.CREATE, True, callback)

    def update_user(self, user: User, callback: RequestCallback) -> None:
        self._submit(user, RequestKind.UPDATE, False, callback)

    def remove_user(self, user: User, callback: RequestCallback) -> None:
        self._submit(user, RequestKind.DELETE, True, callback)

    def get_user_by_id(self, user_id: int, callback: RequestCallback) -> None:
        self._submit(User(read_object_id=user_id), RequestKind.READ, True, callback)

    def login(self, user: LoginUser, callback: RequestCallback) -> None:
        self._submit(user, RequestKind.LOGIN, True, callback)

    def logout(self, callback: RequestCallback) -> None:
        self._submit(None, RequestKind.LOGOUT, True, callback)

    def search(self, query: str, callback: RequestCallback) -> None:
        """Search users by free text."""
        self._submit(SearchCriteria(query=query), RequestKind.SEARCH, True, callback)
