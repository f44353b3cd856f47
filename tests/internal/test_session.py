"""Tests for Session."""

from tapglue_sdk._internal.session import Session
from tapglue_sdk.models import User


class TestSession:
    """Tests for session state transitions."""

    def test_empty(self):
        """Should start logged out."""
        session = Session()
        assert session.is_logged_in is False
        assert session.current_user is None
        assert session.session_token is None

    def test_token_from_user(self):
        """Should take the token from the initial user."""
        session = Session(current_user=User(id=1, session_token="tok"))
        assert session.session_token == "tok"

    def test_start_and_clear(self):
        """Should store and then forget the user."""
        session = Session()
        session.start(User(id=2, session_token="t2"))
        assert session.current_user.id == 2
        assert session.session_token == "t2"

        session.clear()
        assert session.is_logged_in is False
        assert session.session_token is None

    def test_refresh_keeps_token(self):
        """Should replace the profile but keep the token."""
        session = Session(current_user=User(id=1, user_name="a", session_token="tok"))
        session.refresh_user(User(id=1, user_name="b"))
        assert session.current_user.user_name == "b"
        assert session.session_token == "tok"

    def test_refresh_ignored_when_logged_out(self):
        """Should not log a user in through a profile refresh."""
        session = Session()
        session.refresh_user(User(id=1))
        assert session.is_logged_in is False
