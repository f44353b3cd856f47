"""User records."""

from pydantic import Field

from tapglue_sdk.models.base import WireModel
from tapglue_sdk.models.image import Image


class User(WireModel):
    """Tapglue user profile.

    ``read_object_id`` is only used when the entity describes a lookup
    (``GET users/{id}``) and is never sent.
    """

    id: int | None = None
    user_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    custom_id: str | None = None
    social_ids: dict[str, str] | None = None
    images: dict[str, Image] | None = None
    url: str | None = None
    activated: bool | None = None
    session_token: str | None = None
    friend_count: int | None = None
    follower_count: int | None = None
    followed_count: int | None = None
    is_friend: bool | None = None
    is_follower: bool | None = None
    is_followed: bool | None = None
    last_login: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    read_object_id: int | None = Field(default=None, exclude=True)


class LoginUser(WireModel):
    """Credentials for ``me/login``: user name or email plus password."""

    user_name: str | None = None
    email: str | None = None
    password: str
