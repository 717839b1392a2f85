"""
Base exception classes for the Journeyboard backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps them to HTTP responses in one place.
"""

from typing import Optional, Any


class JourneyboardError(Exception):
    """
    Base exception for all Journeyboard errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(JourneyboardError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(JourneyboardError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class DatabaseError(ExternalServiceError):
    """
    A query against the relational store failed.

    The message is safe to show to clients; the driver error
    is chained as __cause__ and only ever logged.
    """

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, service="database", code="DATABASE_ERROR")
