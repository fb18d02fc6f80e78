"""Like edges and the denormalized ``likes_count`` on posts.

The edge write and the counter update are two separate commits, so the
counter may briefly disagree with the edge table if the second write fails.
"""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from meetback.core.errors import NotFound
from meetback.models import Post, PostLike, User
from meetback.schemas.post import LikesPage
from meetback.schemas.user import UserSummary
from meetback.services.lookups import page_offset

logger = logging.getLogger(__name__)


def _get_live_post(db: Session, post_id: int) -> Post:
    post = db.get(Post, post_id)
    if post is None or post.deleted:
        raise NotFound("POST_NOT_FOUND", "Post not found")
    return post


def like_post(db: Session, user_id: int, post_id: int) -> bool:
    """Like a post. Returns ``False`` when the like already existed."""
    _get_live_post(db, post_id)

    db.add(PostLike(user_id=user_id, post_id=post_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("User %s already likes post %s", user_id, post_id)
        return False

    db.execute(
        update(Post).where(Post.id == post_id).values(likes_count=Post.likes_count + 1)
    )
    db.commit()
    logger.info("User %s liked post %s", user_id, post_id)
    return True


def unlike_post(db: Session, user_id: int, post_id: int) -> bool:
    """Remove a like. Returns ``False`` when there was nothing to remove."""
    result = db.execute(
        delete(PostLike).where(PostLike.user_id == user_id, PostLike.post_id == post_id)
    )
    db.commit()
    if result.rowcount == 0:
        return False

    db.execute(
        update(Post)
        .where(Post.id == post_id, Post.likes_count > 0)
        .values(likes_count=Post.likes_count - 1)
    )
    db.commit()
    logger.info("User %s unliked post %s", user_id, post_id)
    return True


def list_likes(db: Session, post_id: int, page: int = 1, limit: int = 10) -> LikesPage:
    """Users who liked a post, most recent first.

    Likes left by deleted accounts count towards ``total`` but have no
    summary to show.
    """
    _get_live_post(db, post_id)

    total = db.execute(
        select(func.count()).select_from(PostLike).where(PostLike.post_id == post_id)
    ).scalar_one()
    stmt = (
        select(User)
        .join(PostLike, PostLike.user_id == User.id)
        .where(PostLike.post_id == post_id)
        .order_by(PostLike.created_at.desc(), PostLike.id.desc())
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    users = [UserSummary.model_validate(u) for u in db.execute(stmt).scalars()]
    return LikesPage(users=users, total=total, page=page, limit=limit)
