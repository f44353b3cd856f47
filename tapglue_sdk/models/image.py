"""Image reference nested on users and events."""

from tapglue_sdk.models.base import WireModel


class Image(WireModel):
    """Media reference: dimensions, kind and location."""

    height: int | None = None
    type: str | None = None
    url: str | None = None
    width: int | None = None
