"""Follow-related Pydantic schemas."""

from datetime import datetime

from .common import CamelModel


class FollowOut(CamelModel):
    """A follow edge."""

    id: int
    follower_id: int
    following_id: int
    created_at: datetime


class FollowStatus(CamelModel):
    is_following: bool
