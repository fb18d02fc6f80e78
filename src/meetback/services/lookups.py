"""Batch lookups shared by services that embed user identities."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from meetback.models import User
from meetback.schemas.user import UserSummary


def user_summaries(db: Session, user_ids: Iterable[int | None]) -> dict[int, UserSummary]:
    """Return summaries keyed by id; ids of deleted accounts are simply absent."""
    wanted = {uid for uid in user_ids if uid is not None}
    if not wanted:
        return {}
    rows = db.execute(select(User).where(User.id.in_(wanted))).scalars()
    return {user.id: UserSummary.model_validate(user) for user in rows}


def page_offset(page: int, limit: int) -> int:
    """Translate 1-based page numbers into a row offset."""
    return (max(page, 1) - 1) * limit
