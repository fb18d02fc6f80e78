"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
Field names are snake_case in Python and camelCase on the wire.
"""

from .follow import FollowOut, FollowStatus
from .post import LikesPage, PostCreate, PostOut
from .rating import RatingCreate, RatingGiven, RatingOut, RatingReceived
from .user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    ProfileUpdateRequest,
    PublicProfile,
    RegisterRequest,
    UserOut,
    UserSummary,
)

__all__ = [
    "FollowOut", "FollowStatus",
    "LikesPage", "PostCreate", "PostOut",
    "RatingCreate", "RatingGiven", "RatingOut", "RatingReceived",
    "ChangePasswordRequest", "LoginRequest", "LoginResponse", "ProfileUpdateRequest",
    "PublicProfile", "RegisterRequest", "UserOut", "UserSummary",
]
