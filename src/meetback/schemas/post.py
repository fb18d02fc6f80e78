"""Post and like Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from meetback.models.post import MAX_POST_LENGTH

from .common import CamelModel
from .user import UserSummary


class PostCreate(CamelModel):
    """Schema for creating a new post or reply."""

    content: str = Field(..., min_length=1, max_length=MAX_POST_LENGTH)
    reply_to: int | None = Field(None, description="Parent post ID for replies")
    media: list[str] = Field(default_factory=list, description="Media URLs or ids")


class PostOut(CamelModel):
    """Post with its author and, for replies, the parent's author."""

    id: int
    author_id: int
    author: UserSummary | None
    content: str
    reply_to: int | None
    reply_to_author: UserSummary | None = None
    thread_root: int | None
    media: list[str]
    replies_count: int
    likes_count: int
    reposts_count: int
    deleted: bool
    created_at: datetime
    updated_at: datetime


class LikesPage(CamelModel):
    """Users who liked a post, one page at a time."""

    users: list[UserSummary]
    total: int
    page: int
    limit: int
