"""
API dependencies wiring the aggregator to its collaborators.
"""
from fastapi import Depends
from sqlalchemy.orm import Session
from wellness.core.clock import Clock, SystemClock
from wellness.db.session import get_db
from wellness.services.checkin_service import CheckInAggregator
from wellness.services.storage_service import SnapshotStore, open_snapshot_store

_system_clock = SystemClock()


def get_clock() -> Clock:
    """Clock used for default dates and averaging windows."""
    return _system_clock


def get_snapshot_store(db: Session = Depends(get_db)) -> SnapshotStore:
    """Snapshot store selected by STORAGE_BACKEND."""
    return open_snapshot_store(db)


def get_aggregator(
    store: SnapshotStore = Depends(get_snapshot_store),
    clock: Clock = Depends(get_clock)
) -> CheckInAggregator:
    """Aggregator over the stored collection, loaded once per request."""
    return CheckInAggregator(store, clock)
