"""Follow graph endpoints."""

from typing import Any

from fastapi import APIRouter, status

from meetback.api.v1.dependencies import CurrentUserDep, SessionDep
from meetback.schemas.common import success_body
from meetback.schemas.follow import FollowStatus
from meetback.services import follow_service

router = APIRouter(prefix="/follow", tags=["follow"])


@router.get("/status/{user_id}")
def follow_status(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    """Whether the caller follows ``user_id``."""
    following = follow_service.get_follow_status(db, current_user.id, user_id)
    return success_body("Follow status retrieved", FollowStatus(is_following=following))


@router.get("/following/me")
def my_following(current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    return success_body(
        "Following list retrieved", follow_service.list_following(db, current_user.id)
    )


@router.get("/followers/me")
def my_followers(current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    return success_body(
        "Followers list retrieved", follow_service.list_followers(db, current_user.id)
    )


@router.get("/following/{user_id}")
def user_following(user_id: int, db: SessionDep) -> dict[str, Any]:
    return success_body("Following list retrieved", follow_service.list_following(db, user_id))


@router.get("/followers/{user_id}")
def user_followers(user_id: int, db: SessionDep) -> dict[str, Any]:
    return success_body("Followers list retrieved", follow_service.list_followers(db, user_id))


@router.post("/{user_id}", status_code=status.HTTP_201_CREATED)
def follow(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    edge = follow_service.follow_user(db, current_user.id, user_id)
    return success_body("User followed", edge)


@router.delete("/{user_id}")
def unfollow(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    follow_service.unfollow_user(db, current_user.id, user_id)
    return success_body("User unfollowed")
