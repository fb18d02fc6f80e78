"""SQLAlchemy model for posts and replies."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from meetback.db.session import Base
from meetback.db.time import utcnow

MAX_POST_LENGTH = 280


class Post(Base):
    """Primary content entity produced by users.

    Replies point at their parent through ``reply_to_id`` and at the first post
    of the conversation through ``thread_root_id``. Posts are never removed;
    ``deleted`` hides them instead.
    """

    __tablename__ = "post"
    __table_args__ = (
        Index("ix_post_author_created", "author_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Plain reference: posts outlive the account that wrote them.
    author_id: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(String(MAX_POST_LENGTH), nullable=False)

    reply_to_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("post.id"), nullable=True, index=True
    )
    thread_root_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("post.id"), nullable=True, index=True
    )

    media: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    replies_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reposts_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
