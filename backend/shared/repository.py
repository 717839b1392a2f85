"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
access to the connection pool.
"""

from .database import Database


class BaseRepository:
    """
    Base class for all repositories.

    Subclasses own the SQL for their tables and return plain values or
    row dicts; mapping to API models happens in the service layer.

    Example:
        class JourneyRepository(BaseRepository):
            def get_last_completed_date(self, user_id: str) -> Optional[date]:
                row = self._db.fetch_one(
                    "SELECT last_completed_date FROM user_journeys WHERE user_id = %s",
                    (user_id,),
                )
                return row["last_completed_date"] if row else None
    """

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a connection pool.

        Args:
            db: Database used for every query this repository runs.
        """
        self._db = db
