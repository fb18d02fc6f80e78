"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, Query, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from meetback.core.errors import Forbidden, Unauthenticated
from meetback.core.security import create_access_token, decode_access_token
from meetback.core.settings import settings
from meetback.db.session import get_db
from meetback.models import ROLE_ADMIN, ROLE_USER, User

REFRESHED_TOKEN_HEADER = "X-Refreshed-Token"

ROLE_LEVELS = {ROLE_USER: 1, ROLE_ADMIN: 2}

# Missing credentials are reported through the error envelope, not FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    request: Request,
    response: Response,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Resolve the caller from the bearer JWT and issue a rolling token.

    The fresh token is sent back in the ``X-Refreshed-Token`` header and kept
    on ``request.state.refreshed_token``.

    Raises:
        Unauthenticated: ``TOKEN_MISSING``, ``INVALID_TOKEN`` or
            ``USER_NOT_FOUND`` when the account behind the token is gone.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("TOKEN_MISSING", "Authentication token is required")

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise Unauthenticated("INVALID_TOKEN", "Could not validate credentials")

    user = db.get(User, user_id)
    if user is None:
        raise Unauthenticated("USER_NOT_FOUND", "User not found")

    refreshed = create_access_token(user.id)
    response.headers[REFRESHED_TOKEN_HEADER] = refreshed
    request.state.refreshed_token = refreshed
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_role(role: str):
    """Build a dependency admitting users whose role is at least ``role``."""
    required = ROLE_LEVELS[role]

    def _check(user: CurrentUserDep) -> User:
        if ROLE_LEVELS.get(user.role, 0) < required:
            raise Forbidden(
                "FORBIDDEN",
                "Insufficient permissions",
                details={"required": role},
            )
        return user

    return _check


AdminDep = Annotated[User, Depends(require_role(ROLE_ADMIN))]


class Pagination:
    """``page`` / ``limit`` query parameters."""

    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    ) -> None:
        self.page = page
        self.limit = limit


PaginationDep = Annotated[Pagination, Depends()]
