"""SQLAlchemy models for the Meetback application."""

from .follow import Follow
from .like import PostLike
from .post import Post
from .rating import Rating
from .user import GENDERS, ROLE_ADMIN, ROLE_USER, User

__all__ = [
    "Follow",
    "PostLike",
    "Post",
    "Rating",
    "User", "GENDERS", "ROLE_ADMIN", "ROLE_USER",
]
