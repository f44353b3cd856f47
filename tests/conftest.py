"""Shared fixtures for Tapglue SDK tests."""

from typing import Any

import pytest

from tapglue_sdk._internal.requests.models import RequestError
from tapglue_sdk._internal.session import Session
from tapglue_sdk.models import User


class RecordingCallback:
    """Records every outcome delivered to it."""

    def __init__(self) -> None:
        self.results: list[tuple[Any, bool]] = []
        self.errors: list[RequestError] = []

    @property
    def calls(self) -> int:
        return len(self.results) + len(self.errors)

    @property
    def result(self) -> Any:
        assert len(self.results) == 1, f"expected one result, got {self.results} / {self.errors}"
        return self.results[0][0]

    @property
    def error(self) -> RequestError:
        assert len(self.errors) == 1, f"expected one error, got {self.results} / {self.errors}"
        return self.errors[0]

    def on_request_finished(self, output: Any, changed_online: bool) -> None:
        self.results.append((output, changed_online))

    def on_request_error(self, error: RequestError) -> None:
        self.errors.append(error)


@pytest.fixture
def callback() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def current_user() -> User:
    return User(id=1001, user_name="ada", session_token="session-abc")


@pytest.fixture
def logged_in_session(current_user: User) -> Session:
    return Session(current_user=current_user)


@pytest.fixture
def logged_out_session() -> Session:
    return Session()
