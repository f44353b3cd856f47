"""Search criteria for user search."""

from pydantic import Field

from tapglue_sdk.models.base import WireModel


class SearchCriteria(WireModel):
    """Free-text user search query."""

    query: str | None = Field(default=None, alias="user_name")
