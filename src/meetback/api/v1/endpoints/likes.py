"""Like endpoints."""

from typing import Any

from fastapi import APIRouter

from meetback.api.v1.dependencies import CurrentUserDep, PaginationDep, SessionDep
from meetback.schemas.common import success_body
from meetback.services import like_service

router = APIRouter(prefix="/like", tags=["likes"])


@router.post("/{post_id}")
def like(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    created = like_service.like_post(db, current_user.id, post_id)
    return success_body("Post liked" if created else "Post already liked", {"liked": True})


@router.delete("/{post_id}")
def unlike(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    removed = like_service.unlike_post(db, current_user.id, post_id)
    return success_body("Like removed" if removed else "Post was not liked", {"liked": False})


@router.get("/{post_id}/users")
def liked_by(post_id: int, paging: PaginationDep, db: SessionDep) -> dict[str, Any]:
    page = like_service.list_likes(db, post_id, page=paging.page, limit=paging.limit)
    return success_body("Likes retrieved", page)
