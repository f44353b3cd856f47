"""Tapglue SDK for Python.

Client for the Tapglue social graph API: users, connections, events, feeds
and search.

Public API:
    TapglueClient - User-facing client
    FutureCallback / FunctionCallback - Request callbacks
    models - Wire entities (User, Connection, Event, Feed, ...)
    exceptions - SDK exceptions

Internal:
    _internal - HTTP, request factory and network manager
"""

from tapglue_sdk._internal.requests.callbacks import FunctionCallback, FutureCallback
from tapglue_sdk._internal.requests.models import RequestError, RequestErrorType
from tapglue_sdk._version import __version__
from tapglue_sdk.client import TapglueClient

__all__ = [
    "__version__",
    "TapglueClient",
    "FunctionCallback",
    "FutureCallback",
    "RequestError",
    "RequestErrorType",
]
