"""
Shared fixtures: pinned clock, in-memory snapshot store, per-test SQLite database.
"""
import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import wellness.models  # noqa: F401
from wellness.main import app
from wellness.api.dependencies import get_clock
from wellness.core.clock import FixedClock
from wellness.core.config import settings
from wellness.db.base import Base
from wellness.db.session import get_db
from wellness.services.checkin_service import CheckInAggregator
from wellness.services.storage_service import decode_snapshot, encode_snapshot

FIXED_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


class MemorySnapshotStore:
    """Snapshot store keeping the encoded payload in memory."""

    def __init__(self, payload=None):
        self.payload = payload
        self.saves = 0

    def load(self):
        if self.payload is None:
            return []
        return decode_snapshot(self.payload)

    def save(self, checkins):
        self.payload = encode_snapshot(checkins)
        self.saves += 1


@pytest.fixture
def clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture
def store():
    return MemorySnapshotStore()


@pytest.fixture
def aggregator(store, clock):
    return CheckInAggregator(store, clock)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory, clock, monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "database")

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
