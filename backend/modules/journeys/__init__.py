"""
Journeys module.

Tracks the daily journey each user can complete once per calendar day.
"""

from .models import JourneyStatus, JourneyCompleted
from .repository import JourneyRepository
from .service import JourneyService

__all__ = [
    "JourneyStatus",
    "JourneyCompleted",
    "JourneyRepository",
    "JourneyService",
]
