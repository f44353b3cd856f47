"""Session state: the current user and their session token."""

import threading

from tapglue_sdk.models.user import User


class Session:
    """Holds the authenticated user for one client.

    The network manager updates it when login, logout and user writes
    succeed. The request factory only reads ``current_user``.
    """

    def __init__(self, current_user: User | None = None, session_token: str | None = None) -> None:
        self._lock = threading.Lock()
        self._current_user = current_user
        self._session_token = session_token or (current_user.session_token if current_user else None)

    @property
    def current_user(self) -> User | None:
        return self._current_user

    @property
    def session_token(self) -> str | None:
        return self._session_token

    @property
    def is_logged_in(self) -> bool:
        return self._current_user is not None

    def start(self, user: User) -> None:
        """Store the user returned by a successful login."""
        with self._lock:
            self._current_user = user
            self._session_token = user.session_token or self._session_token

    def refresh_user(self, user: User) -> None:
        """Replace the stored profile, keeping the session token."""
        with self._lock:
            if self._current_user is None:
                return
            self._current_user = user

    def clear(self) -> None:
        with self._lock:
            self._current_user = None
            self._session_token = None
