"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from .common import CamelModel


class RegisterRequest(CamelModel):
    """Registration payload.

    Every field is optional at the schema level so that the service can answer
    with a single ``MISSING_DATA`` condition.
    """

    email: str | None = None
    password: str | None = None
    handle: str | None = None
    display_name: str | None = None


class LoginRequest(CamelModel):
    """Email and password credentials."""

    email: str | None = None
    password: str | None = None


class ProfileUpdateRequest(CamelModel):
    """Partial profile update; omitted fields keep their value."""

    display_name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=160)
    gender: str | None = None


class ChangePasswordRequest(CamelModel):
    current_password: str | None = None
    new_password: str | None = None


class UserSummary(CamelModel):
    """Minimal public identity embedded in other payloads."""

    id: int
    handle: str
    display_name: str
    avatar: str


class UserOut(CamelModel):
    """Private view of an account, without restricted fields."""

    id: int
    handle: str
    email: str
    display_name: str
    description: str
    gender: str
    avatar: str
    location: str
    role: str
    auth_provider: str
    email_verified: bool
    is_hidden: bool
    last_login: datetime | None
    created_at: datetime
    updated_at: datetime


class PublicProfile(CamelModel):
    """Profile returned to anyone looking a user up by handle."""

    id: int
    handle: str
    display_name: str
    avatar: str
    description: str
    gender: str
    trust_score: float
    role: str
    created_at: datetime


class LoginResponse(CamelModel):
    token: str
    user: UserOut
