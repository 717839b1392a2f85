"""
Score service implementation.

Keeps only each user's best score and serves the leaderboard.
"""

import logging
from typing import Optional

from shared.models import VerifiedIdentity

from .models import LEADERBOARD_SIZE, ScoreEntry
from .repository import ScoreRepository

logger = logging.getLogger(__name__)


class ScoreService:
    """
    High-score bookkeeping on top of ScoreRepository.

    A submission is stored only when it is strictly greater than the
    user's current best, which counts as 0 when nothing is on record.
    """

    def __init__(self, repository: ScoreRepository):
        self._repository = repository

    def submit(self, identity: VerifiedIdentity, score: int) -> Optional[ScoreEntry]:
        """
        Submit a score for the caller.

        Returns:
            The stored entry if the score is a new best, None otherwise.
        """
        current = self._repository.get_best_score(identity.uid) or 0
        if score <= current:
            return None

        row = self._repository.upsert_high_score(identity.uid, score, identity.display_label)
        if row is None:
            # A concurrent submission stored a higher score first.
            logger.debug("Score %s for %s lost to a concurrent update", score, identity.uid)
            return None
        return ScoreEntry(**row)

    def leaderboard(self) -> list[ScoreEntry]:
        """Top scores, highest first."""
        rows = self._repository.top_scores(LEADERBOARD_SIZE)
        return [ScoreEntry(**row) for row in rows[:LEADERBOARD_SIZE]]
