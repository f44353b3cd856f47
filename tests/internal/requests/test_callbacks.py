"""Tests for request callbacks and descriptors."""

import pytest
from pydantic import ValidationError

from tapglue_sdk._internal.requests.callbacks import (
    FunctionCallback,
    FutureCallback,
    OnceCallback,
)
from tapglue_sdk._internal.requests.models import (
    Request,
    RequestError,
    RequestErrorType,
    RequestKind,
)
from tapglue_sdk.exceptions import TapglueRequestError
from tapglue_sdk.models import Feed, User


class TestFunctionCallback:
    """Tests for FunctionCallback."""

    def test_forwards_success(self):
        """Should call on_success with output and flag."""
        seen = []
        callback = FunctionCallback(lambda out, online: seen.append((out, online)), seen.append)
        callback.on_request_finished("x", True)
        assert seen == [("x", True)]

    def test_forwards_error(self):
        """Should call on_error with the error."""
        seen = []
        callback = FunctionCallback(lambda out, online: None, seen.append)
        error = RequestError(type=RequestErrorType.NO_NETWORK)
        callback.on_request_error(error)
        assert seen == [error]


class TestFutureCallback:
    """Tests for FutureCallback."""

    def test_success_sets_result(self):
        """Should resolve the future with the output."""
        callback = FutureCallback()
        callback.on_request_finished(42, False)
        assert callback.future.result(timeout=1) == 42
        assert callback.changed_online is False

    def test_error_sets_exception(self):
        """Should fail the future with TapglueRequestError."""
        callback = FutureCallback()
        callback.on_request_error(RequestError(type=RequestErrorType.USER_NOT_LOGGED_IN))
        with pytest.raises(TapglueRequestError) as exc_info:
            callback.future.result(timeout=1)
        assert exc_info.value.error.type is RequestErrorType.USER_NOT_LOGGED_IN


class TestOnceCallback:
    """Tests for OnceCallback."""

    def test_only_first_outcome_fires(self, callback):
        """Should drop every outcome after the first."""
        once = OnceCallback(callback)
        once.on_request_finished("first", True)
        once.on_request_finished("second", True)
        once.on_request_error(RequestError(type=RequestErrorType.UNKNOWN_ERROR))

        assert callback.results == [("first", True)]
        assert callback.errors == []
        assert once.fired is True

    def test_error_then_success(self, callback):
        """Should keep the error when it arrives first."""
        once = OnceCallback(callback)
        once.on_request_error(RequestError(type=RequestErrorType.SERVER_ERROR))
        once.on_request_finished("late", True)

        assert callback.calls == 1
        assert callback.error.type is RequestErrorType.SERVER_ERROR

    def test_debug_logs_duplicates(self, callback, capsys):
        """Should log dropped outcomes in debug mode."""
        once = OnceCallback(callback, debug=True)
        once.on_request_finished(1, True)
        once.on_request_finished(2, True)

        assert "[tapglue-sdk:callback] Dropping duplicate" in capsys.readouterr().err


class TestRequest:
    """Tests for the Request descriptor."""

    def test_is_immutable(self, callback):
        """Should reject changes after construction."""
        request = Request(entity=Feed(), kind=RequestKind.READ, online_only=True, callback=callback)
        with pytest.raises(ValidationError):
            request.online_only = False

    def test_keeps_entity_instance(self, callback):
        """Should keep the concrete entity type."""
        user = User(id=1)
        request = Request(entity=user, kind=RequestKind.UPDATE, online_only=False, callback=callback)
        assert request.entity is user

    def test_entity_required_except_logout(self, callback):
        """Should require an entity for everything but LOGOUT."""
        Request(entity=None, kind=RequestKind.LOGOUT, online_only=True, callback=callback)
        with pytest.raises(ValidationError):
            Request(entity=None, kind=RequestKind.READ, online_only=True, callback=callback)

    def test_construction_has_no_side_effects(self, callback):
        """Should not invoke the callback when built."""
        Request(entity=Feed(), kind=RequestKind.READ, online_only=True, callback=callback)
        assert callback.calls == 0

    def test_describe(self, callback):
        """Should summarize kind, entity and flag."""
        request = Request(entity=Feed(), kind=RequestKind.READ, online_only=True, callback=callback)
        assert request.describe() == {"kind": "read", "entity": "Feed", "online_only": True}
