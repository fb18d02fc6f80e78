"""Rating-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from meetback.models.rating import MAX_COMMENT_LENGTH

from .common import CamelModel
from .user import UserSummary


class RatingCreate(CamelModel):
    """Payload for rating another user.

    ``ratings`` is validated against the aspect list by the rating service.
    """

    to_user_id: int | None = None
    ratings: dict[str, Any] | None = None
    comment: str | None = Field("", max_length=MAX_COMMENT_LENGTH)


class RatingOut(CamelModel):
    id: int
    from_user: UserSummary | None
    to_user: UserSummary | None
    ratings: dict[str, float]
    comment: str
    weight: float
    visibility: bool
    created_at: datetime


class RatingReceived(CamelModel):
    """Entry of the history of ratings a user has received."""

    id: int
    from_user: UserSummary | None
    ratings: dict[str, float]
    comment: str | None
    weight: float
    created_at: datetime


class RatingGiven(CamelModel):
    """Entry of the list of ratings a user has emitted."""

    id: int
    to_user: UserSummary | None
    ratings: dict[str, float]
    comment: str | None
    created_at: datetime
