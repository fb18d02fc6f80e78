"""Exception handlers producing the ``{success: false, ...}`` envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meetback.api.v1.dependencies import REFRESHED_TOKEN_HEADER
from meetback.core.errors import ServiceError
from meetback.schemas.common import error_body

logger = logging.getLogger(__name__)


def _refreshed_token_headers(request: Request) -> dict[str, str] | None:
    """Carry the rolling token onto errors raised after authentication."""
    token = getattr(request.state, "refreshed_token", None)
    if token is None:
        return None
    return {REFRESHED_TOKEN_HEADER: token}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.code, exc.details),
        headers=_refreshed_token_headers(request),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=error_body("Invalid request data", "VALIDATION_ERROR", exc.errors()),
        headers=_refreshed_token_headers(request),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), "HTTP_ERROR"),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", "SERVER_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every envelope handler to ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
