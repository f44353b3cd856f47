"""Base model shared by all Tapglue entities."""

from typing import Any, Self

from pydantic import BaseModel


class WireModel(BaseModel):
    """Immutable entity with wire-format field aliases.

    Attributes use snake_case in memory; the wire name of each field is its
    alias. Read-request parameters are declared with ``exclude=True`` so they
    never reach the request body.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> Self:
        """Build an entity from a wire payload."""
        return cls.model_validate(data)
