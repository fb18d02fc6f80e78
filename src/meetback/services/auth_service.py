"""Account management: registration, credentials, profile and deletion.

All functions take an explicit SQLAlchemy session plus the caller's identity
and return plain schema objects. Failures are raised as
:class:`~meetback.core.errors.ServiceError` subclasses.
"""
from __future__ import annotations

import logging
import re
from typing import Any

from sqlalchemy import delete, or_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from meetback.core.errors import (
    Conflict,
    InternalError,
    NotFound,
    Unauthenticated,
    ValidationFailed,
)
from meetback.core.security import create_access_token, hash_password, verify_password
from meetback.core.settings import settings
from meetback.db.session import atomic
from meetback.db.time import utcnow
from meetback.models import GENDERS, Follow, Rating, User
from meetback.schemas.user import LoginResponse, PublicProfile, UserOut
from meetback.services import follow_service, post_service, rating_service

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")

OVERVIEW_POSTS_LIMIT = 20


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("NOT_FOUND", "User not found")
    return user


def register_user(
    db: Session,
    *,
    email: str | None,
    password: str | None,
    handle: str | None,
    display_name: str | None,
) -> UserOut:
    """Create an account after checking that the email is not taken.

    The existence check and the insert share one transaction. A unique
    violation on email or handle is reported as ``ALREADY_USER``.
    """
    if not email or not password or not handle or not display_name:
        raise ValidationFailed(
            "MISSING_DATA",
            "Missing required fields",
            details={
                "email": bool(email),
                "password": bool(password),
                "handle": bool(handle),
                "displayName": bool(display_name),
            },
        )

    email = email.strip()
    if not EMAIL_PATTERN.match(email):
        raise ValidationFailed("INVALID_EMAIL", f"{email} is not a valid email")
    if len(password) < settings.min_password_length:
        raise ValidationFailed("WEAK_PASSWORD", "Password is too short")
    handle = handle.strip().lower()

    try:
        with atomic(db):
            existing = db.query(User).filter(User.email == email).first()
            if existing is not None:
                raise Conflict("ALREADY_USER", "User is already registered")
            user = User(
                email=email,
                password_hash=hash_password(password),
                handle=handle,
                display_name=display_name,
            )
            db.add(user)
            db.flush()
    except Conflict:
        logger.info("Registration rejected, email already in use: %s", email)
        raise
    except IntegrityError as err:
        logger.info("Registration rejected by unique constraint: %s / %s", email, handle)
        raise Conflict("ALREADY_USER", "User is already registered") from err
    except SQLAlchemyError as err:
        logger.exception("Failed to register user %s", email)
        raise InternalError("REGISTER_ERROR", "Could not register the user") from err

    logger.info("Registered user %s (%s)", user.id, handle)
    return UserOut.model_validate(user)


def login_user(db: Session, *, email: str | None, password: str | None) -> LoginResponse:
    """Verify credentials, stamp the login and issue an access token."""
    if not email or not password:
        raise ValidationFailed("VALIDATION_ERROR", "Email and password are required")

    user = db.query(User).filter(User.email == email.strip()).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %s", email)
        raise Unauthenticated("INVALID_CREDENTIALS", "Incorrect email or password")

    user.last_login = utcnow()
    user.account_status = True
    db.commit()

    logger.info("User %s logged in", user.id)
    return LoginResponse(token=create_access_token(user.id), user=UserOut.model_validate(user))


def logout_user(db: Session, user: User) -> dict[str, str]:
    """Mark the account as logged out. Issued tokens stay valid until expiry."""
    user.account_status = False
    db.commit()
    logger.info("User %s logged out", user.id)
    return {"email": user.email}


def get_session_data(user: User, token: str) -> dict[str, Any]:
    """Payload for token verification: the refreshed token and the private view."""
    return {"token": token, "user": UserOut.model_validate(user)}


def get_user_profile(db: Session, user_id: int) -> UserOut:
    return UserOut.model_validate(_get_user_or_404(db, user_id))


def update_user_profile(
    db: Session,
    user_id: int,
    *,
    display_name: str | None = None,
    description: str | None = None,
    gender: str | None = None,
) -> UserOut:
    """Apply a partial profile update; ``None`` leaves a field unchanged."""
    if gender is not None and gender not in GENDERS:
        raise ValidationFailed(
            "INVALID_GENDER",
            "Invalid gender",
            details={"allowed": list(GENDERS)},
            status_code=400,
        )

    user = _get_user_or_404(db, user_id)
    if display_name is not None:
        user.display_name = display_name
    if description is not None:
        user.description = description
    if gender is not None:
        user.gender = gender
    db.commit()

    logger.info("Updated profile of user %s", user_id)
    return UserOut.model_validate(user)


def change_password(
    db: Session,
    user_id: int,
    *,
    current_password: str | None,
    new_password: str | None,
) -> None:
    if not current_password or not new_password:
        raise ValidationFailed("VALIDATION_ERROR", "Current and new password are required")

    user = _get_user_or_404(db, user_id)
    if not verify_password(current_password, user.password_hash):
        raise Unauthenticated("INVALID_PASSWORD", "Current password is incorrect")
    if len(new_password) < settings.min_password_length:
        raise ValidationFailed("WEAK_PASSWORD", "New password is too weak", status_code=400)

    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password changed for user %s", user_id)


def get_public_profile(db: Session, handle: str) -> PublicProfile:
    """Look up a visible account by handle (case-insensitive)."""
    user = (
        db.query(User)
        .filter(User.handle == handle.strip().lower(), User.is_hidden.is_(False))
        .first()
    )
    if user is None:
        raise NotFound("NOT_FOUND", "User not found")
    return PublicProfile.model_validate(user)


def get_account_overview(db: Session, user_id: int) -> dict[str, Any]:
    """Everything the profile screen of the signed-in user needs."""
    user = get_user_profile(db, user_id)
    followers = follow_service.list_followers(db, user_id)
    following = follow_service.list_following(db, user_id)
    return {
        "user": user,
        "posts": post_service.list_posts_by_user(
            db, user_id, page=1, limit=OVERVIEW_POSTS_LIMIT
        ),
        "ratingsHistory": rating_service.get_ratings_history(db, user_id),
        "ratingsStats": rating_service.get_rating_stats(db, user_id),
        "ratingsGiven": rating_service.get_ratings_given(db, user_id),
        "followers": followers,
        "following": following,
        "followersCount": len(followers),
        "followingCount": len(following),
    }


def delete_account(db: Session, user: User) -> dict[str, str]:
    """Remove an account, all in one transaction.

    Follow edges touching the user are deleted, ratings touching the user are
    hidden (``visibility = False``) and the user row is removed. Posts and
    likes written by the user are left in place.

    Raises:
        InternalError: If any step fails; nothing is persisted in that case.
    """
    user_id = user.id
    email = user.email
    try:
        with atomic(db):
            db.execute(
                delete(Follow).where(
                    or_(Follow.follower_id == user_id, Follow.following_id == user_id)
                )
            )
            db.execute(
                update(Rating)
                .where(or_(Rating.from_user_id == user_id, Rating.to_user_id == user_id))
                .values(visibility=False)
            )
            db.execute(delete(User).where(User.id == user_id))
    except SQLAlchemyError as err:
        logger.exception("Failed to delete account %s", user_id)
        raise InternalError("DELETE_USER_ERROR", "Could not delete the account") from err

    logger.info("Deleted account %s", user_id)
    return {"email": email}
