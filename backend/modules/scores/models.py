"""
Scores module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

# Upper bound of a PostgreSQL INTEGER column
MAX_SCORE = 2_147_483_647

# Number of rows returned by the leaderboard
LEADERBOARD_SIZE = 10


class ScoreSubmission(BaseModel):
    """Request body for POST /api/scores."""

    score: int = Field(..., ge=0, le=MAX_SCORE, strict=True, description="Score reached in the game")


class ScoreEntry(BaseModel):
    """A user's best score as stored in the scores table."""

    user_id: str
    score: int
    display_name: Optional[str] = None
    timestamp: datetime


class ScoreNotUpdated(BaseModel):
    """Returned when a submission does not beat the stored best."""

    message: str = "Score not updated"
