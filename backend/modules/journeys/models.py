"""
Journeys module data models.
"""

from pydantic import BaseModel, Field


class JourneyStatus(BaseModel):
    """Whether the caller finished today's journey."""

    completed: bool = Field(..., description="True if completed on the current day")


class JourneyCompleted(BaseModel):
    """Confirmation returned after recording a completion."""

    message: str = "Journey completed"
