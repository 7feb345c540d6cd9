"""Pydantic schemas for request/response validation."""

from .activity_schemas import (
    ActivityOptionSchema,
    ActivityCreateRequest,
    ActivityUpdateRequest,
    ActivityResponse,
    ActivityListResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ActivityOptionSchema",
    "ActivityCreateRequest",
    "ActivityUpdateRequest",
    "ActivityResponse",
    "ActivityListResponse",
    "ErrorResponse",
    "HealthResponse",
]
