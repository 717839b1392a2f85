"""
Health check endpoints.

Provides endpoints for monitoring application health and database
connectivity. Both are public.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings
from shared.database import Database
from ..dependencies import get_app_settings, get_database

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running. Does not touch the database.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/test-db")
def database_check(db: Database = Depends(get_database)) -> dict[str, Any]:
    """
    Database connectivity check.

    Runs a trivial time query and returns the server's answer,
    e.g. {"now": "2024-05-01T12:00:00+00:00"}.
    """
    return db.ping()
