"""Masking of user credentials in request bodies before debug output."""

from typing import Any

# Wire names of the credentials a Tapglue body can carry
CREDENTIAL_FIELDS: frozenset[str] = frozenset({"password", "session_token"})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a wire body with user credentials masked.

    Users nested in maps or lists (feed users, connection lists) are masked
    too. The original payload is never mutated.
    """
    return {key: _mask(key, value) for key, value in payload.items()}


def _mask(key: str, value: Any) -> Any:
    if key in CREDENTIAL_FIELDS:
        return REDACTED_VALUE
    if isinstance(value, dict):
        return redact_payload(value)
    if isinstance(value, list):
        return [redact_payload(item) if isinstance(item, dict) else item for item in value]
    return value
