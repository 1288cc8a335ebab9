"""Post Schemas — Pydantic models for the board API.

Invariants:
    - PostCreate.nickname is stripped; emptiness is checked by the store so the
      client gets the localized VALIDATION_ERROR, not a field-level 400
    - pinColor is never rejected here: a non-string value becomes None and an
      invalid string simply yields no color
    - comment has no length cap (stored as TEXT)
    - PostResponse serializes camelCase (postLocationLat, pinColor, createdAt, ...)

Design Decisions:
    - alias_generator=to_camel + populate_by_name: the frontend speaks camelCase,
      routes build responses from ORM rows via from_attributes
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API schemas — camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class PostLocation(CamelModel):
    """Where the poster stood when posting."""
    lat: float | None = Field(None, ge=-90, le=90)
    lng: float | None = Field(None, ge=-180, le=180)


class PostCreate(CamelModel):
    """Body of POST /api/posts."""
    nickname: str = Field("", max_length=100)
    comment: str = ""
    post_location: PostLocation | None = None
    pin_color: str | None = None
    user_id: str | None = Field(None, max_length=100)
    stone_id: str | None = Field(None, max_length=50)

    @field_validator("nickname", mode="before")
    @classmethod
    def strip_nickname(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("comment", mode="before")
    @classmethod
    def none_comment_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("pin_color", mode="before")
    @classmethod
    def non_string_color_to_none(cls, v):
        return v if isinstance(v, str) else None


class PostResponse(CamelModel):
    """One stored post."""
    id: int
    stone_id: str
    nickname: str
    comment: str
    post_location_lat: float | None = None
    post_location_lng: float | None = None
    user_id: str | None = None
    pin_color: str | None = None
    created_at: datetime


class CreatePostResponse(CamelModel):
    """Body returned by POST /api/posts."""
    success: bool = True
    post: PostResponse


class ClearAllResponse(CamelModel):
    """Body returned by DELETE /api/debug/clear-all."""
    success: bool = True
    message: str
    deleted_posts: int
    deleted_stones: int


class MapsConfigResponse(CamelModel):
    """Google Maps settings handed to the frontend."""
    api_key: str
    map_id: str
