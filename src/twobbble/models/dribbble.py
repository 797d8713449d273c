"""Pydantic models for Dribbble API response schemas and request enums."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ShotList(StrEnum):
    ANIMATED = "animated"
    ATTACHMENTS = "attachments"
    DEBUTS = "debuts"
    PLAYOFFS = "playoffs"
    REBOUNDS = "rebounds"
    TEAMS = "teams"


class ShotSort(StrEnum):
    COMMENTS = "comments"
    RECENT = "recent"
    VIEWS = "views"


class ShotTimeframe(StrEnum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    EVER = "ever"


class UserScope(StrEnum):
    """First path segment of the user shots route.

    ``user`` addresses the authenticated account, ``users`` any other
    account and then needs an id.
    """

    USER = "user"
    USERS = "users"


# --- Response models ---


class DribbbleModel(BaseModel):
    """Base for response entities: immutable, tolerant of unknown fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ShotImages(DribbbleModel):
    hidpi: str | None = None
    normal: str | None = None
    teaser: str | None = None


class User(DribbbleModel):
    id: int
    name: str | None = None
    username: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    location: str | None = None
    links: dict[str, str] = Field(default_factory=dict)
    type: str | None = None
    pro: bool = False
    buckets_count: int = 0
    comments_received_count: int = 0
    followers_count: int = 0
    followings_count: int = 0
    likes_count: int = 0
    likes_received_count: int = 0
    projects_count: int = 0
    rebounds_received_count: int = 0
    shots_count: int = 0
    teams_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_links(cls, data: Any) -> Any:
        # The API sends "links": null for accounts without any
        if isinstance(data, dict) and data.get("links") is None:
            data = {k: v for k, v in data.items() if k != "links"}
        return data


class Shot(DribbbleModel):
    """A published design post.

    ``user`` is absent when the shot is embedded in a listing that is
    already scoped to one account (e.g. the user shots route).
    """

    id: int
    title: str = ""
    description: str | None = None
    width: int | None = None
    height: int | None = None
    images: ShotImages = Field(default_factory=ShotImages)
    views_count: int = 0
    likes_count: int = 0
    comments_count: int = 0
    attachments_count: int = 0
    rebounds_count: int = 0
    buckets_count: int = 0
    html_url: str | None = None
    animated: bool = False
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None
    team: User | None = None


class Comment(DribbbleModel):
    id: int
    body: str = ""
    likes_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None


class Token(DribbbleModel):
    access_token: str
    token_type: str = "bearer"
    scope: str | None = None


class LikeShotResponse(DribbbleModel):
    id: int | None = None
    created_at: datetime | None = None

    @property
    def is_liked(self) -> bool:
        return self.created_at is not None


class Bucket(DribbbleModel):
    id: int
    name: str = ""
    description: str | None = None
    shots_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None


class Like(DribbbleModel):
    id: int | None = None
    created_at: datetime | None = None
    shot: Shot


class NullResponse(DribbbleModel):
    """Result of calls whose success is signalled by the HTTP status alone."""
