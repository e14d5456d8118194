"""
Check-in aggregator: the date-keyed collection and the figures derived from it.
"""
import bisect
import logging
from datetime import date, timedelta
from typing import List, Optional
from wellness.core.clock import Clock
from wellness.schemas.checkin import CheckIn
from wellness.schemas.insight import SummaryResponse, TrendPoint
from wellness.services.recommendation_service import get_recommendation
from wellness.services.sentiment_service import analyze_sentiment
from wellness.services.storage_service import SnapshotStore

logger = logging.getLogger(__name__)

WEEK_WINDOW_DAYS = 7
MONTH_WINDOW_DAYS = 30


class CheckInAggregator:
    """
    Owns the check-in collection: at most one entry per date, sorted by date.

    The collection is loaded from the store once on construction and saved
    in full after every upsert or delete.
    """

    def __init__(self, store: SnapshotStore, clock: Clock):
        self.store = store
        self.clock = clock
        self._checkins: List[CheckIn] = sorted(store.load(), key=lambda c: c.date)

    def __len__(self) -> int:
        return len(self._checkins)

    def _index_of(self, entry_date: date) -> int:
        """Position of entry_date in the sorted collection, -1 if absent."""
        dates = [c.date for c in self._checkins]
        index = bisect.bisect_left(dates, entry_date)
        if index < len(dates) and dates[index] == entry_date:
            return index
        return -1

    def list(self) -> List[CheckIn]:
        """All check-ins, oldest first."""
        return list(self._checkins)

    def get(self, entry_date: date) -> Optional[CheckIn]:
        index = self._index_of(entry_date)
        return self._checkins[index] if index >= 0 else None

    def upsert(self, entry_date: date, mood_value: int, note: str) -> CheckIn:
        """
        Create or replace the check-in for a date.

        An existing entry is replaced in place; a new one is inserted at its
        sorted position. Sentiment is recomputed and created_at restamped.
        """
        sentiment = analyze_sentiment(note, mood_value)
        entry = CheckIn(
            date=entry_date,
            mood_value=mood_value,
            note=note,
            sentiment_score=sentiment.score,
            sentiment_label=sentiment.label,
            created_at=self.clock.now(),
        )

        index = self._index_of(entry_date)
        if index >= 0:
            self._checkins[index] = entry
            logger.info(f"Replaced check-in for {entry_date} ({sentiment.label.value} {sentiment.score:.2f})")
        else:
            dates = [c.date for c in self._checkins]
            self._checkins.insert(bisect.bisect_left(dates, entry_date), entry)
            logger.info(f"Added check-in for {entry_date} ({sentiment.label.value} {sentiment.score:.2f})")

        self.store.save(self._checkins)
        return entry

    def delete(self, entry_date: date) -> None:
        """Remove the check-in for a date. Absent dates are not an error."""
        index = self._index_of(entry_date)
        if index >= 0:
            del self._checkins[index]
            logger.info(f"Deleted check-in for {entry_date}")
        else:
            logger.debug(f"No check-in for {entry_date}, nothing to delete")
        self.store.save(self._checkins)

    def latest(self) -> Optional[CheckIn]:
        """Check-in with the greatest date, regardless of when it was last edited."""
        return self._checkins[-1] if self._checkins else None

    def average(self, window_days: int, as_of: Optional[date] = None) -> Optional[float]:
        """
        Mean sentiment score of entries dated on or after as_of - (window_days - 1).

        Args:
            window_days: Window length in calendar days
            as_of: Last day of the window (defaults to today)

        Returns:
            Mean rounded to 2 decimals, or None when no entry falls in the window
        """
        as_of = as_of or self.clock.today()
        cutoff = as_of - timedelta(days=window_days - 1)
        scores = [c.sentiment_score for c in self._checkins if c.date >= cutoff]
        if not scores:
            return None
        return round(sum(scores) / len(scores), 2)

    def trend_series(self, window_days: int, as_of: Optional[date] = None) -> List[TrendPoint]:
        """
        One point per day from as_of - window_days + 1 through as_of.

        Days without a check-in keep a None score; gaps are not interpolated.
        """
        as_of = as_of or self.clock.today()
        scores = {c.date: c.sentiment_score for c in self._checkins}
        points = []
        for offset in range(window_days - 1, -1, -1):
            day = as_of - timedelta(days=offset)
            points.append(TrendPoint(date=day, score=scores.get(day)))
        return points

    def summary(self, as_of: Optional[date] = None) -> SummaryResponse:
        """Latest entry, 7/30-day averages and the recommendation for the latest score."""
        as_of = as_of or self.clock.today()
        latest = self.latest()
        latest_score = latest.sentiment_score if latest else 0.0
        return SummaryResponse(
            as_of=as_of,
            latest=latest,
            week_average=self.average(WEEK_WINDOW_DAYS, as_of),
            month_average=self.average(MONTH_WINDOW_DAYS, as_of),
            recommendation=get_recommendation(latest_score),
        )
