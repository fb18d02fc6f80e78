"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .follow import router as follow_router
from .likes import router as likes_router
from .posts import router as posts_router
from .ratings import router as ratings_router

__all__ = [
    "auth_router",
    "follow_router",
    "likes_router",
    "posts_router",
    "ratings_router",
]
