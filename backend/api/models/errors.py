"""
Error response models.

Standardized error responses for the API. Authentication failures are
not listed here: they answer with a plain-text body.
"""

from typing import Any
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = {}


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Validation Error"
    detail: list[dict]
