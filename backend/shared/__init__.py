"""
Shared infrastructure for Journeyboard backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: PostgreSQL connection pool
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import Database, create_database
from .exceptions import (
    JourneyboardError,
    AuthenticationError,
    ExternalServiceError,
    DatabaseError,
)
from .models import VerifiedIdentity

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "create_database",
    "JourneyboardError",
    "AuthenticationError",
    "ExternalServiceError",
    "DatabaseError",
    "VerifiedIdentity",
]
