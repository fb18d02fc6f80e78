"""SQLAlchemy model for user accounts."""

from __future__ import annotations

import secrets
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from meetback.db.session import Base
from meetback.db.time import utcnow

ROLE_USER = "user"
ROLE_ADMIN = "admin"

GENDERS = ("male", "female", "custom", "N/A")


def _verification_token() -> str:
    return secrets.token_urlsafe(3)[:4]


class User(Base):
    """Registered account with credentials and public profile fields."""

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    handle: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    auth_provider: Mapped[str] = mapped_column(String(16), nullable=False, default="email")
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=ROLE_USER, index=True)

    # Profile
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(160), nullable=False, default="")
    gender: Mapped[str] = mapped_column(String(8), nullable=False, default="N/A")
    avatar: Mapped[str] = mapped_column(Text, nullable=False, default="")
    location: Mapped[str] = mapped_column(Text, nullable=False, default="")
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Internal state, never exposed through the private user view.
    trust_score: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    account_status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    email_verification_token: Mapped[str] = mapped_column(
        String(16), nullable=False, default=_verification_token
    )
    email_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    last_login: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
