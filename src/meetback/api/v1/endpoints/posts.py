"""Post-related endpoints for the Meetback API."""

from typing import Any

from fastapi import APIRouter, status

from meetback.api.v1.dependencies import AdminDep, CurrentUserDep, PaginationDep, SessionDep
from meetback.schemas.common import success_body
from meetback.schemas.post import PostCreate
from meetback.services import post_service

router = APIRouter(prefix="/post", tags=["posts"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    """Publish a post, or a reply when ``replyTo`` is given."""
    post = post_service.create_post(
        db,
        current_user.id,
        payload.content,
        reply_to=payload.reply_to,
        media=payload.media,
    )
    return success_body("Post created", post)


@router.get("/user/{user_id}")
def posts_by_user(user_id: int, paging: PaginationDep, db: SessionDep) -> dict[str, Any]:
    posts = post_service.list_posts_by_user(db, user_id, page=paging.page, limit=paging.limit)
    return success_body("Posts retrieved", posts)


@router.get("/feed/me")
def my_feed(current_user: CurrentUserDep, paging: PaginationDep, db: SessionDep) -> dict[str, Any]:
    """Timeline of the caller and the users they follow."""
    posts = post_service.get_feed(db, current_user.id, page=paging.page, limit=paging.limit)
    return success_body("Feed retrieved", posts)


@router.get("/admin/all")
def all_posts(admin: AdminDep, paging: PaginationDep, db: SessionDep) -> dict[str, Any]:
    posts = post_service.list_all_posts(db, page=paging.page, limit=paging.limit)
    return success_body("Posts retrieved", posts)


@router.get("/{post_id}")
def get_post(post_id: int, db: SessionDep) -> dict[str, Any]:
    return success_body("Post retrieved", post_service.get_post(db, post_id))


@router.get("/{post_id}/replies")
def post_replies(post_id: int, paging: PaginationDep, db: SessionDep) -> dict[str, Any]:
    replies = post_service.list_replies(db, post_id, page=paging.page, limit=paging.limit)
    return success_body("Replies retrieved", replies)


@router.delete("/{post_id}")
def delete_post(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    post_service.delete_post(db, current_user, post_id)
    return success_body("Post deleted")
