"""Like edges between users and posts."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from meetback.db.session import Base
from meetback.db.time import utcnow


class PostLike(Base):
    """A user liked a post. One row per (user, post) pair."""

    __tablename__ = "post_like"
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_post_like_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("post.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
