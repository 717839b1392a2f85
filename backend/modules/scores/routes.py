"""
Score API endpoints.

Submitting a score requires authentication; the leaderboard is public.
The submission body is read only after the caller is authenticated, so
an unauthenticated request is refused whatever its body contains.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.middleware.auth import get_current_user
from api.dependencies import get_score_service
from shared.models import VerifiedIdentity

from .models import ScoreEntry, ScoreNotUpdated, ScoreSubmission
from .service import ScoreService

router = APIRouter()
leaderboard_router = APIRouter()


async def get_score_submission(
    request: Request,
    user: VerifiedIdentity = Depends(get_current_user),
) -> ScoreSubmission:
    """Parse the JSON body of an authenticated score submission."""
    body = await request.body()
    try:
        return ScoreSubmission.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)],
            body=body,
        )


@router.post(
    "",
    response_model=ScoreEntry,
    status_code=201,
    responses={200: {"model": ScoreNotUpdated, "description": "Not a new best score"}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ScoreSubmission.model_json_schema()}},
        },
    },
)
def submit_score(
    submission: ScoreSubmission = Depends(get_score_submission),
    user: VerifiedIdentity = Depends(get_current_user),
    service: ScoreService = Depends(get_score_service),
):
    """
    Submit a score for the current user.

    Returns 201 with the stored row when the score beats the user's
    best, otherwise 200 with a message and nothing stored.
    """
    entry = service.submit(user, submission.score)
    if entry is None:
        return JSONResponse(status_code=200, content=ScoreNotUpdated().model_dump())
    return entry


@leaderboard_router.get("", response_model=list[ScoreEntry])
def get_leaderboard(
    service: ScoreService = Depends(get_score_service),
) -> list[ScoreEntry]:
    """
    Get the top 10 scores, highest first.
    """
    return service.leaderboard()
