"""Peer ratings between users."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from meetback.db.session import Base
from meetback.db.time import utcnow

MAX_COMMENT_LENGTH = 250


class Rating(Base):
    """Per-aspect scores given by ``from_user_id`` to ``to_user_id``.

    Ratings are hidden rather than removed when either party deletes their
    account, so both user columns are plain references.
    """

    __tablename__ = "rating"
    __table_args__ = (
        UniqueConstraint("from_user_id", "to_user_id", name="uq_rating_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    from_user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    to_user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # aspect -> score in [1, 5]
    ratings: Mapped[dict[str, float]] = mapped_column(JSON, nullable=False)
    comment: Mapped[str] = mapped_column(String(MAX_COMMENT_LENGTH), nullable=False, default="")
    # Future-proof for reputation models; default weight = 1.0.
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    visibility: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
