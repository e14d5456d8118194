"""
Clock collaborators supplying "today" and write timestamps.
"""
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current date and time."""

    def today(self) -> date:
        ...

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC. today() is the UTC calendar date, not the local one."""

    def today(self) -> date:
        return self.now().date()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to a single moment."""

    def __init__(self, moment: datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self.moment = moment

    def today(self) -> date:
        return self.moment.date()

    def now(self) -> datetime:
        return self.moment
