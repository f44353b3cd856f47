"""Feed manager: feed, event and connection-list retrieval with a cached feed."""

import threading
from typing import Any

from tapglue_sdk._internal.requests.callbacks import RequestCallback
from tapglue_sdk._internal.requests.factory import RequestFactory
from tapglue_sdk._internal.requests.models import RequestError
from tapglue_sdk.models import Feed


class _CachingCallback:
    """Stores a successful feed before forwarding the outcome."""

    def __init__(self, manager: "FeedManager", callback: RequestCallback) -> None:
        self._manager = manager
        self._callback = callback

    def on_request_finished(self, output: Any, changed_online: bool) -> None:
        if isinstance(output, Feed):
            self._manager._store(output)
        self._callback.on_request_finished(output, changed_online)

    def on_request_error(self, error: RequestError) -> None:
        self._callback.on_request_error(error)


class FeedManager:
    """Retrieves feeds and connection lists through the request factory.

    The last news feed fetched for the current user is kept in memory and
    can be served without a network round trip.
    """

    def __init__(self, factory: RequestFactory) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._cached_feed: Feed | None = None

    def _store(self, feed: Feed) -> None:
        with self._lock:
            self._cached_feed = feed

    @property
    def cached_feed(self) -> Feed | None:
        return self._cached_feed

    def clear_cache(self) -> None:
        with self._lock:
            self._cached_feed = None

    # =========================================================================
    # Cached Feed
    # =========================================================================

    def cached_feed_for_current_user(self, callback: RequestCallback) -> None:
        """Deliver the cached feed (``None`` when nothing is cached)."""
        callback.on_request_finished(self._cached_feed, False)

    def get_cached_feed_if_available(self, callback: RequestCallback) -> None:
        """Deliver the cached feed, or fetch it when nothing is cached."""
        feed = self._cached_feed
        if feed is not None:
            callback.on_request_finished(feed, False)
            return
        self.retrieve_feed_for_current_user(callback)

    # =========================================================================
    # Feed and Events
    # =========================================================================

    def retrieve_feed_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_feed(_CachingCallback(self, callback))

    def retrieve_unread_feed_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_unread_feed(callback)

    def retrieve_unread_count_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_feed_count(callback)

    def retrieve_events_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_events(callback)

    def retrieve_events_for_user(self, user_id: int, callback: RequestCallback) -> None:
        self._factory.get_events(callback, user_id=user_id)

    # =========================================================================
    # Connection Lists
    # =========================================================================

    def retrieve_followers_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_current_user_followers(callback)

    def retrieve_follows_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_current_user_followed(callback)

    def retrieve_friends_for_current_user(self, callback: RequestCallback) -> None:
        self._factory.get_current_user_friends(callback)

    def retrieve_followers_for_user(self, user_id: int, callback: RequestCallback) -> None:
        self._factory.get_user_followers(user_id, callback)

    def retrieve_follows_for_user(self, user_id: int, callback: RequestCallback) -> None:
        self._factory.get_user_followed(user_id, callback)

    def retrieve_friends_for_user(self, user_id: int, callback: RequestCallback) -> None:
        self._factory.get_user_friends(user_id, callback)
