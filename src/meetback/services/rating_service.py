"""Peer ratings: creation under a cooldown, aggregation and listings."""
from __future__ import annotations

import logging
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from meetback.core.errors import (
    Conflict,
    Forbidden,
    InternalError,
    NotFound,
    RateLimited,
    ValidationFailed,
)
from meetback.core.settings import settings
from meetback.db.session import atomic
from meetback.db.time import as_utc, utcnow
from meetback.models import Rating, User
from meetback.schemas.rating import RatingGiven, RatingOut, RatingReceived
from meetback.services.lookups import user_summaries

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5


def _is_score(value: Any) -> bool:
    # bool is a Real subclass; True must not count as a score of 1.
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return MIN_SCORE <= value <= MAX_SCORE


def validate_aspects(ratings: dict[str, Any]) -> None:
    """Check a non-empty subset of the known aspects, each scored in [1, 5]."""
    aspects = settings.rating_aspects
    valid = (
        0 < len(ratings) <= len(aspects)
        and all(key in aspects for key in ratings)
        and all(_is_score(value) for value in ratings.values())
    )
    if not valid:
        raise ValidationFailed(
            "INVALID_ASPECTS",
            "Invalid aspects or scores",
            details={"allowed": list(aspects), "min": MIN_SCORE, "max": MAX_SCORE},
        )


def _to_out(db: Session, rating: Rating) -> RatingOut:
    summaries = user_summaries(db, [rating.from_user_id, rating.to_user_id])
    return RatingOut(
        id=rating.id,
        from_user=summaries.get(rating.from_user_id),
        to_user=summaries.get(rating.to_user_id),
        ratings=rating.ratings,
        comment=rating.comment,
        weight=rating.weight,
        visibility=rating.visibility,
        created_at=rating.created_at,
    )


def create_rating(
    db: Session,
    from_user_id: int,
    to_user_id: int | None,
    ratings: dict[str, Any] | None,
    comment: str | None = "",
) -> RatingOut:
    """Rate another user.

    A pair may hold a single rating. A repeat within the cooldown window is
    rejected; after it the previous rating is replaced by the new one inside
    one transaction.

    Raises:
        ValidationFailed: ``VALIDATION_ERROR`` for a missing target or scores,
            ``INVALID_ASPECTS`` for bad aspect keys or scores.
        Forbidden: ``SELF_RATING_NOT_ALLOWED``.
        NotFound: ``USER_NOT_FOUND`` when the target does not exist.
        RateLimited: ``RATE_LIMITED`` while the cooldown has not elapsed.
        Conflict: ``ALREADY_RATED`` when a concurrent rating won the race.
    """
    if to_user_id is None or not isinstance(ratings, dict):
        raise ValidationFailed("VALIDATION_ERROR", "Invalid input data")
    if from_user_id == to_user_id:
        raise Forbidden("SELF_RATING_NOT_ALLOWED", "You cannot rate yourself")
    validate_aspects(ratings)
    if db.get(User, to_user_id) is None:
        raise NotFound("USER_NOT_FOUND", "User not found")

    cooldown = timedelta(days=settings.rating_cooldown_days)
    try:
        with atomic(db):
            previous = db.execute(
                select(Rating).where(
                    Rating.from_user_id == from_user_id, Rating.to_user_id == to_user_id
                )
            ).scalar_one_or_none()

            now = utcnow()
            if previous is not None:
                if now - as_utc(previous.created_at) < cooldown:
                    raise RateLimited(
                        "RATE_LIMITED",
                        f"You already rated this person in the last "
                        f"{settings.rating_cooldown_days} days",
                    )
                db.execute(delete(Rating).where(Rating.id == previous.id))
                db.flush()
                logger.info(
                    "Replacing rating %s from %s to %s", previous.id, from_user_id, to_user_id
                )

            rating = Rating(
                from_user_id=from_user_id,
                to_user_id=to_user_id,
                ratings=dict(ratings),
                comment=comment or "",
                weight=1.0,
                created_at=now,
                updated_at=now,
            )
            db.add(rating)
            db.flush()
    except RateLimited:
        logger.info("Rating from %s to %s rejected by cooldown", from_user_id, to_user_id)
        raise
    except IntegrityError as err:
        raise Conflict("ALREADY_RATED", "You already rated this person") from err
    except SQLAlchemyError as err:
        logger.exception("Failed to store rating from %s to %s", from_user_id, to_user_id)
        raise InternalError("CREATE_RATING_ERROR", "Could not create the rating") from err

    logger.info("User %s rated user %s", from_user_id, to_user_id)
    return _to_out(db, rating)


def _round_half_up(value: float) -> float:
    # Exact halves round away from zero: 1.125 -> 1.13.
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def get_rating_stats(db: Session, user_id: int) -> dict[str, float | None]:
    """Mean score per aspect over every rating received, hidden ones included.

    Aspects nobody scored are ``None``.
    """
    aspects = settings.rating_aspects
    totals = {aspect: 0.0 for aspect in aspects}
    counts = {aspect: 0 for aspect in aspects}

    rows = db.execute(select(Rating.ratings).where(Rating.to_user_id == user_id)).scalars()
    for scores in rows:
        for aspect, value in (scores or {}).items():
            if aspect in totals:
                totals[aspect] += value
                counts[aspect] += 1

    return {
        aspect: _round_half_up(totals[aspect] / counts[aspect]) if counts[aspect] else None
        for aspect in aspects
    }


def get_ratings_history(db: Session, user_id: int) -> list[RatingReceived]:
    """Ratings received by a user, newest first."""
    rows = db.execute(
        select(Rating)
        .where(Rating.to_user_id == user_id)
        .order_by(Rating.created_at.desc(), Rating.id.desc())
    ).scalars().all()
    summaries = user_summaries(db, [r.from_user_id for r in rows])
    return [
        RatingReceived(
            id=r.id,
            from_user=summaries.get(r.from_user_id),
            ratings=r.ratings,
            comment=r.comment or None,
            weight=r.weight,
            created_at=r.created_at,
        )
        for r in rows
    ]


def get_ratings_given(db: Session, user_id: int) -> list[RatingGiven]:
    """Ratings emitted by a user, newest first."""
    rows = db.execute(
        select(Rating)
        .where(Rating.from_user_id == user_id)
        .order_by(Rating.created_at.desc(), Rating.id.desc())
    ).scalars().all()
    summaries = user_summaries(db, [r.to_user_id for r in rows])
    return [
        RatingGiven(
            id=r.id,
            to_user=summaries.get(r.to_user_id),
            ratings=r.ratings,
            comment=r.comment or None,
            created_at=r.created_at,
        )
        for r in rows
    ]


def delete_rating(db: Session, rating_id: int) -> bool:
    """Remove a rating; returns whether it existed."""
    result = db.execute(delete(Rating).where(Rating.id == rating_id))
    db.commit()
    deleted = result.rowcount > 0
    if deleted:
        logger.info("Rating %s deleted", rating_id)
    return deleted
