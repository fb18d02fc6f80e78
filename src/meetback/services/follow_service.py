"""Follow graph operations."""
from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from meetback.core.errors import Conflict, NotFound, ValidationFailed
from meetback.models import Follow, User
from meetback.schemas.follow import FollowOut
from meetback.schemas.user import UserSummary

logger = logging.getLogger(__name__)


def follow_user(db: Session, follower_id: int, following_id: int) -> FollowOut:
    """Create the edge ``follower_id -> following_id``.

    Raises:
        ValidationFailed: ``INVALID_ACTION`` when following oneself.
        NotFound: ``USER_NOT_FOUND`` when the target does not exist.
        Conflict: ``DUPLICATE_FOLLOW`` when the edge already exists.
    """
    if follower_id == following_id:
        raise ValidationFailed("INVALID_ACTION", "You cannot follow yourself", status_code=400)
    if db.get(User, following_id) is None:
        raise NotFound("USER_NOT_FOUND", "User not found")

    edge = Follow(follower_id=follower_id, following_id=following_id)
    db.add(edge)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        logger.info("User %s already follows %s", follower_id, following_id)
        raise Conflict(
            "DUPLICATE_FOLLOW", "You are already following this user", status_code=400
        ) from err

    db.refresh(edge)
    logger.info("User %s followed %s", follower_id, following_id)
    return FollowOut.model_validate(edge)


def unfollow_user(db: Session, follower_id: int, following_id: int) -> None:
    if follower_id == following_id:
        raise ValidationFailed("INVALID_ACTION", "You cannot unfollow yourself", status_code=400)

    result = db.execute(
        delete(Follow).where(
            Follow.follower_id == follower_id, Follow.following_id == following_id
        )
    )
    if result.rowcount == 0:
        db.rollback()
        raise ValidationFailed(
            "NOT_FOLLOWING", "You are not following this user", status_code=400
        )
    db.commit()
    logger.info("User %s unfollowed %s", follower_id, following_id)


def get_follow_status(db: Session, follower_id: int, following_id: int) -> bool:
    """Whether ``follower_id`` follows ``following_id``; always false for oneself."""
    if follower_id == following_id:
        return False
    stmt = select(Follow.id).where(
        Follow.follower_id == follower_id, Follow.following_id == following_id
    )
    return db.execute(stmt).first() is not None


def following_ids(db: Session, user_id: int) -> list[int]:
    stmt = select(Follow.following_id).where(Follow.follower_id == user_id)
    return list(db.execute(stmt).scalars())


def list_following(db: Session, user_id: int) -> list[UserSummary]:
    """Users that ``user_id`` follows, most recent edge first."""
    stmt = (
        select(User)
        .join(Follow, Follow.following_id == User.id)
        .where(Follow.follower_id == user_id)
        .order_by(Follow.created_at.desc(), Follow.id.desc())
    )
    return [UserSummary.model_validate(u) for u in db.execute(stmt).scalars()]


def list_followers(db: Session, user_id: int) -> list[UserSummary]:
    """Users following ``user_id``, most recent edge first."""
    stmt = (
        select(User)
        .join(Follow, Follow.follower_id == User.id)
        .where(Follow.following_id == user_id)
        .order_by(Follow.created_at.desc(), Follow.id.desc())
    )
    return [UserSummary.model_validate(u) for u in db.execute(stmt).scalars()]
