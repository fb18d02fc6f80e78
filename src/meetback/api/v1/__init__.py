"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    follow_router,
    likes_router,
    posts_router,
    ratings_router,
)

__all__ = [
    "auth_router",
    "follow_router",
    "likes_router",
    "posts_router",
    "ratings_router",
]
