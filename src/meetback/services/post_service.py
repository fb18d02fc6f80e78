"""Post store: creation with thread resolution, reads and soft deletion."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meetback.core.errors import Forbidden, InternalError, NotFound
from meetback.db.session import atomic
from meetback.models import Post, User
from meetback.schemas.post import PostOut
from meetback.services import follow_service
from meetback.services.lookups import page_offset, user_summaries

logger = logging.getLogger(__name__)


def _build_views(db: Session, posts: Sequence[Post]) -> list[PostOut]:
    """Attach author summaries, and the parent's author for replies."""
    parent_ids = {p.reply_to_id for p in posts if p.reply_to_id is not None}
    parent_authors: dict[int, int] = {}
    if parent_ids:
        rows = db.execute(select(Post.id, Post.author_id).where(Post.id.in_(parent_ids)))
        parent_authors = {pid: author for pid, author in rows}

    summaries = user_summaries(
        db, [p.author_id for p in posts] + list(parent_authors.values())
    )

    views = []
    for post in posts:
        parent_author = parent_authors.get(post.reply_to_id) if post.reply_to_id else None
        views.append(
            PostOut(
                id=post.id,
                author_id=post.author_id,
                author=summaries.get(post.author_id),
                content=post.content,
                reply_to=post.reply_to_id,
                reply_to_author=summaries.get(parent_author) if parent_author else None,
                thread_root=post.thread_root_id,
                media=list(post.media or []),
                replies_count=post.replies_count,
                likes_count=post.likes_count,
                reposts_count=post.reposts_count,
                deleted=post.deleted,
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
        )
    return views


def _to_view(db: Session, post: Post) -> PostOut:
    return _build_views(db, [post])[0]


def create_post(
    db: Session,
    author_id: int,
    content: str,
    reply_to: int | None = None,
    media: list[str] | None = None,
) -> PostOut:
    """Create a root post or a reply.

    For a reply the thread root is the parent's thread root, or the parent
    itself when the parent is a root post. The parent's reply counter is
    incremented in the same transaction as the insert.

    Raises:
        NotFound: ``POST_NOT_FOUND`` when ``reply_to`` does not exist.
    """
    try:
        with atomic(db):
            thread_root = None
            if reply_to is not None:
                parent = db.get(Post, reply_to)
                if parent is None:
                    raise NotFound("POST_NOT_FOUND", "Parent post not found")
                thread_root = (
                    parent.thread_root_id if parent.thread_root_id is not None else parent.id
                )
                parent.replies_count = Post.replies_count + 1

            post = Post(
                author_id=author_id,
                content=content,
                reply_to_id=reply_to,
                thread_root_id=thread_root,
                media=list(media or []),
            )
            db.add(post)
            db.flush()
    except SQLAlchemyError as err:
        logger.exception("Failed to create post for user %s", author_id)
        raise InternalError("CREATE_POST_ERROR", "Could not create the post") from err

    logger.info("User %s created post %s (reply_to=%s)", author_id, post.id, reply_to)
    return _to_view(db, post)


def get_post(db: Session, post_id: int) -> PostOut:
    post = db.get(Post, post_id)
    if post is None or post.deleted:
        raise NotFound("POST_NOT_FOUND", "Post not found")
    return _to_view(db, post)


def list_posts_by_user(db: Session, user_id: int, page: int = 1, limit: int = 10) -> list[PostOut]:
    """Non-deleted posts of a user, newest first."""
    stmt = (
        select(Post)
        .where(Post.author_id == user_id, Post.deleted.is_(False))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    return _build_views(db, db.execute(stmt).scalars().all())


def get_feed(db: Session, user_id: int, page: int = 1, limit: int = 10) -> list[PostOut]:
    """Posts of followed users plus the caller's own, newest first."""
    authors = follow_service.following_ids(db, user_id) + [user_id]
    stmt = (
        select(Post)
        .where(Post.author_id.in_(authors), Post.deleted.is_(False))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    return _build_views(db, db.execute(stmt).scalars().all())


def list_replies(db: Session, post_id: int, page: int = 1, limit: int = 10) -> list[PostOut]:
    """Direct replies to a post in conversation order."""
    if db.get(Post, post_id) is None:
        raise NotFound("POST_NOT_FOUND", "Post not found")
    stmt = (
        select(Post)
        .where(Post.reply_to_id == post_id, Post.deleted.is_(False))
        .order_by(Post.created_at.asc(), Post.id.asc())
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    return _build_views(db, db.execute(stmt).scalars().all())


def list_all_posts(db: Session, page: int = 1, limit: int = 10) -> list[PostOut]:
    """Every post including soft-deleted ones. Admin listing."""
    stmt = (
        select(Post)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    return _build_views(db, db.execute(stmt).scalars().all())


def delete_post(db: Session, user: User, post_id: int) -> None:
    """Soft delete a post. Only its author or an admin may do so."""
    post = db.get(Post, post_id)
    if post is None or post.deleted:
        raise NotFound("POST_NOT_FOUND", "Post not found")
    if post.author_id != user.id and not user.is_admin:
        logger.warning("User %s tried to delete post %s of user %s", user.id, post_id, post.author_id)
        raise Forbidden("FORBIDDEN", "You can only delete your own posts")

    post.deleted = True
    db.commit()
    logger.info("Post %s soft-deleted by user %s", post_id, user.id)
