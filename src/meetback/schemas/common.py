"""Shared Pydantic schemas and response envelope helpers."""
from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase aliases while accepting either spelling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def success_body(message: str, data: Any = None) -> dict[str, Any]:
    """Build the ``{success, message, data}`` envelope for a successful call."""
    return {
        "success": True,
        "message": message,
        "data": jsonable_encoder(data, by_alias=True),
    }


def error_body(message: str, code: str, details: Any = None) -> dict[str, Any]:
    """Build the ``{success, message, error}`` envelope for a failed call."""
    return {
        "success": False,
        "message": message,
        "error": {"code": code, "details": jsonable_encoder(details)},
    }
