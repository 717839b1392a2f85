"""
Scores module.

Stores each user's best score and serves the leaderboard.
"""

from .models import ScoreSubmission, ScoreEntry, ScoreNotUpdated, LEADERBOARD_SIZE
from .repository import ScoreRepository
from .service import ScoreService

__all__ = [
    "ScoreSubmission",
    "ScoreEntry",
    "ScoreNotUpdated",
    "LEADERBOARD_SIZE",
    "ScoreRepository",
    "ScoreService",
]
