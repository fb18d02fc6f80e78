"""Domain error conditions raised by the service layer.

Services never signal failures through message strings. Each error carries an
explicit :class:`ErrorKind` plus a stable machine-readable ``code`` that the
HTTP boundary copies into the response envelope.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Taxonomy of failure conditions."""

    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"


DEFAULT_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.INTERNAL: 500,
}


class ServiceError(Exception):
    """Base class for every error a service may raise.

    Args:
        code: Stable machine-readable error code (e.g. ``ALREADY_USER``).
        message: Human-readable summary.
        details: Optional extra payload echoed to the client.
        status_code: Optional HTTP status overriding the kind default.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        code: str,
        message: str,
        *,
        details: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details
        self._status_code = status_code

    @property
    def status_code(self) -> int:
        """HTTP status the boundary should answer with."""
        if self._status_code is not None:
            return self._status_code
        return DEFAULT_STATUS[self.kind]


class ValidationFailed(ServiceError):
    kind = ErrorKind.VALIDATION


class Unauthenticated(ServiceError):
    kind = ErrorKind.UNAUTHENTICATED


class Forbidden(ServiceError):
    kind = ErrorKind.FORBIDDEN


class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND


class Conflict(ServiceError):
    kind = ErrorKind.CONFLICT


class RateLimited(ServiceError):
    kind = ErrorKind.RATE_LIMITED


class InternalError(ServiceError):
    kind = ErrorKind.INTERNAL
