"""Network layer: route table, offline queue and request execution."""

from tapglue_sdk._internal.network.manager import NetworkManager
from tapglue_sdk._internal.network.queue import OfflineQueue
from tapglue_sdk._internal.network.routes import Route, resolve_route

__all__ = ["NetworkManager", "OfflineQueue", "Route", "resolve_route"]
