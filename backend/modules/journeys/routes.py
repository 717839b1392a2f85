"""
Journey API endpoints.

Both endpoints require authentication. Handlers are plain functions so
FastAPI runs their blocking database calls in the threadpool.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_journey_service
from shared.models import VerifiedIdentity

from .models import JourneyCompleted, JourneyStatus
from .service import JourneyService

router = APIRouter()


@router.get("/check", response_model=JourneyStatus)
def check_journey(
    user: VerifiedIdentity = Depends(get_current_user),
    service: JourneyService = Depends(get_journey_service),
) -> JourneyStatus:
    """
    Report whether the caller completed today's journey.
    """
    return JourneyStatus(completed=service.is_completed_today(user.uid))


@router.post("/complete", response_model=JourneyCompleted, status_code=201)
def complete_journey(
    user: VerifiedIdentity = Depends(get_current_user),
    service: JourneyService = Depends(get_journey_service),
) -> JourneyCompleted:
    """
    Record today's journey as completed.

    Idempotent within a calendar day.
    """
    service.complete_today(user.uid)
    return JourneyCompleted()
