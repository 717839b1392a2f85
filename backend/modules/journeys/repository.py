"""
Journey repository for database access.

Encapsulates the SQL for the user_journeys table: one row per user
holding the last calendar day they completed the journey.
"""

from datetime import date
from typing import Any, Optional

from shared.repository import BaseRepository


class JourneyRepository(BaseRepository):
    """
    Repository for daily journey completion.

    Note: Rows are never deleted here.
    """

    def get_last_completed_date(self, user_id: str) -> Optional[Any]:
        """
        Get the stored completion day for a user.

        Returns:
            The raw last_completed_date value, or None if the user
            has never completed a journey.
        """
        row = self._db.fetch_one(
            "SELECT last_completed_date FROM user_journeys WHERE user_id = %s",
            (user_id,),
        )
        if row is None:
            return None
        return row["last_completed_date"]

    def mark_completed(self, user_id: str, day: date) -> None:
        """Insert or overwrite the user's completion day."""
        self._db.execute(
            """
            INSERT INTO user_journeys (user_id, last_completed_date)
            VALUES (%s, %s)
            ON CONFLICT (user_id)
            DO UPDATE SET last_completed_date = EXCLUDED.last_completed_date
            """,
            (user_id, day),
        )
