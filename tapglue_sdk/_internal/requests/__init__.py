"""Request descriptors, callbacks and the request factory."""

from tapglue_sdk._internal.requests.callbacks import (
    FunctionCallback,
    FutureCallback,
    OnceCallback,
    RequestCallback,
)
from tapglue_sdk._internal.requests.factory import RequestFactory
from tapglue_sdk._internal.requests.models import (
    Request,
    RequestError,
    RequestErrorType,
    RequestKind,
)

__all__ = [
    "FunctionCallback",
    "FutureCallback",
    "OnceCallback",
    "RequestCallback",
    "RequestFactory",
    "Request",
    "RequestError",
    "RequestErrorType",
    "RequestKind",
]
