"""Rating endpoints."""

from typing import Any

from fastapi import APIRouter, status

from meetback.api.v1.dependencies import AdminDep, CurrentUserDep, SessionDep
from meetback.schemas.common import success_body
from meetback.schemas.rating import RatingCreate
from meetback.services import rating_service

router = APIRouter(prefix="/rating", tags=["ratings"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_rating(
    payload: RatingCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, Any]:
    rating = rating_service.create_rating(
        db,
        current_user.id,
        payload.to_user_id,
        payload.ratings,
        payload.comment,
    )
    return success_body("Rating created", rating)


@router.get("/from/{user_id}")
def ratings_given(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    """Ratings emitted by ``user_id``."""
    return success_body("Ratings given retrieved", rating_service.get_ratings_given(db, user_id))


@router.get("/{user_id}/history")
def ratings_history(user_id: int, db: SessionDep) -> dict[str, Any]:
    return success_body(
        "Ratings history retrieved", rating_service.get_ratings_history(db, user_id)
    )


@router.get("/{user_id}")
def rating_stats(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> dict[str, Any]:
    """Average score per aspect for ``user_id``."""
    return success_body("Average ratings retrieved", rating_service.get_rating_stats(db, user_id))


@router.delete("/{rating_id}")
def delete_rating(rating_id: int, admin: AdminDep, db: SessionDep) -> dict[str, Any]:
    deleted = rating_service.delete_rating(db, rating_id)
    return success_body("Rating deleted" if deleted else "No rating found with that id")
