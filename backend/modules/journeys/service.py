"""
Journey service implementation.

A journey is a daily task. Its completion resets when the calendar day
changes in the configured timezone.
"""

from datetime import date, datetime
from typing import Any, Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .repository import JourneyRepository

Clock = Callable[[ZoneInfo], datetime]


def _system_clock(tz: ZoneInfo) -> datetime:
    return datetime.now(tz)


def as_calendar_date(value: Any, tz: ZoneInfo) -> date:
    """
    Normalize a stored completion value to a calendar date.

    DATE columns come back as date objects; timestamps are converted
    to the journey timezone first; strings are parsed as ISO 8601.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value) if "T" in value or " " in value else date.fromisoformat(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported completion date value: {value!r}")


class JourneyService:
    """
    Records and reports daily journey completion.

    Args:
        repository: Data access for user_journeys
        timezone: IANA timezone name that defines "today"
        clock: Returns the current time in a timezone (tests pin it)
    """

    def __init__(
        self,
        repository: JourneyRepository,
        timezone: str = "UTC",
        clock: Optional[Clock] = None,
    ):
        try:
            self._tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown journey timezone: {timezone}") from e
        self._repository = repository
        self._clock = clock or _system_clock

    def today(self) -> date:
        """Current calendar day in the journey timezone."""
        return self._clock(self._tz).date()

    def is_completed_today(self, user_id: str) -> bool:
        last_completed = self._repository.get_last_completed_date(user_id)
        if last_completed is None:
            return False
        return as_calendar_date(last_completed, self._tz) == self.today()

    def complete_today(self, user_id: str) -> date:
        """Mark today's journey as done. Safe to call repeatedly."""
        today = self.today()
        self._repository.mark_completed(user_id, today)
        return today
