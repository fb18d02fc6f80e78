"""Service layer: each module wraps one slice of the data store."""

from . import auth_service, follow_service, like_service, post_service, rating_service

__all__ = [
    "auth_service",
    "follow_service",
    "like_service",
    "post_service",
    "rating_service",
]
