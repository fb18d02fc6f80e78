"""Main entry point for the Meetback application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from meetback import __version__
from meetback.api.v1 import (
    auth_router,
    follow_router,
    likes_router,
    posts_router,
    ratings_router,
)
from meetback.api.v1.dependencies import REFRESHED_TOKEN_HEADER
from meetback.api.v1.handlers import register_exception_handlers
from meetback.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Social network API: accounts, follows, posts, likes and peer ratings",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
    expose_headers=[REFRESHED_TOKEN_HEADER],
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

register_exception_handlers(app)

# Include API routers
app.include_router(auth_router, prefix="/api")
app.include_router(follow_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(likes_router, prefix="/api")
app.include_router(ratings_router, prefix="/api")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("meetback.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
