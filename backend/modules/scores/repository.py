"""
Score repository for database access.

Encapsulates the SQL for the scores table, which keeps one high-score
row per user.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import LEADERBOARD_SIZE

_COLUMNS = "user_id, score, display_name, timestamp"


class ScoreRepository(BaseRepository):
    """Repository for best scores and the leaderboard."""

    def get_best_score(self, user_id: str) -> Optional[int]:
        """Get the user's stored best score, or None if there is none."""
        row = self._db.fetch_one(
            "SELECT score FROM scores WHERE user_id = %s",
            (user_id,),
        )
        if row is None:
            return None
        return row["score"]

    def upsert_high_score(
        self,
        user_id: str,
        score: int,
        display_name: Optional[str],
    ) -> Optional[dict[str, Any]]:
        """
        Store a new best score for the user.

        The conflict clause only overwrites a lower score, so concurrent
        submissions settle on the highest one.

        Returns:
            The stored row, or None if an equal or higher score was
            already on record.
        """
        return self._db.fetch_one(
            f"""
            INSERT INTO scores (user_id, score, display_name, timestamp)
            VALUES (%s, %s, %s, NOW())
            ON CONFLICT (user_id) DO UPDATE
            SET score = EXCLUDED.score,
                display_name = EXCLUDED.display_name,
                timestamp = EXCLUDED.timestamp
            WHERE scores.score < EXCLUDED.score
            RETURNING {_COLUMNS}
            """,
            (user_id, score, display_name),
        )

    def top_scores(self, limit: int = LEADERBOARD_SIZE) -> list[dict[str, Any]]:
        """Get the highest scores, best first."""
        return self._db.fetch_all(
            f"SELECT {_COLUMNS} FROM scores ORDER BY score DESC LIMIT %s",
            (limit,),
        )
