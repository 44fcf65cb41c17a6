"""API module for FastAPI REST endpoints."""

from prd_generator.api.models import (
    ErrorResponse,
    GenerateRequest,
    IdeasResponse,
    ResultResponse,
)

__all__ = [
    "ErrorResponse",
    "GenerateRequest",
    "IdeasResponse",
    "ResultResponse",
]
