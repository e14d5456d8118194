"""
Snapshot stores persisting the whole check-in collection as one JSON payload.
"""
import json
import logging
import os
from pathlib import Path
from typing import List, Protocol, Sequence, Union
from pydantic import ValidationError
from sqlalchemy.orm import Session
from wellness.core.config import settings
from wellness.core.utils import serialize_date
from wellness.models.snapshot import StorageSnapshot
from wellness.schemas.checkin import CheckIn

logger = logging.getLogger(__name__)


class SnapshotDecodeError(ValueError):
    """Stored payload could not be parsed into check-ins."""


class SnapshotStore(Protocol):
    """Loads and saves the full collection, never part of it."""

    def load(self) -> List[CheckIn]:
        ...

    def save(self, checkins: Sequence[CheckIn]) -> None:
        ...


def encode_snapshot(checkins: Sequence[CheckIn]) -> str:
    """Serialize check-ins to the JSON array stored under the storage key."""
    return json.dumps(
        [checkin.model_dump(by_alias=True) for checkin in checkins],
        default=serialize_date,
        ensure_ascii=False,
    )


def decode_snapshot(payload: str) -> List[CheckIn]:
    """
    Parse a stored JSON payload.

    Raises:
        SnapshotDecodeError: payload is not JSON, not an array, holds entries
            that are not valid check-ins, or repeats a date
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise SnapshotDecodeError(f"Snapshot is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SnapshotDecodeError(f"Snapshot must be a JSON array, got {type(data).__name__}")

    try:
        checkins = [CheckIn.model_validate(item) for item in data]
    except ValidationError as e:
        raise SnapshotDecodeError(f"Snapshot holds an invalid check-in: {e}") from e

    dates = [checkin.date for checkin in checkins]
    if len(set(dates)) != len(dates):
        raise SnapshotDecodeError("Snapshot holds more than one check-in for the same date")

    return sorted(checkins, key=lambda c: c.date)


class DatabaseSnapshotStore:
    """Keeps the snapshot in the storage_snapshots table, one row per key."""

    def __init__(self, db: Session, key: str):
        self.db = db
        self.key = key

    def _get_row(self):
        return self.db.query(StorageSnapshot).filter(StorageSnapshot.key == self.key).first()

    def load(self) -> List[CheckIn]:
        row = self._get_row()
        if row is None:
            logger.debug(f"No snapshot stored under '{self.key}', starting empty")
            return []
        checkins = decode_snapshot(row.payload)
        logger.debug(f"Loaded {len(checkins)} check-ins from '{self.key}'")
        return checkins

    def save(self, checkins: Sequence[CheckIn]) -> None:
        payload = encode_snapshot(checkins)
        row = self._get_row()
        if row is None:
            row = StorageSnapshot(key=self.key, payload=payload)
            self.db.add(row)
        else:
            row.payload = payload
        self.db.commit()
        logger.debug(f"Saved {len(checkins)} check-ins to '{self.key}'")


class JsonFileSnapshotStore:
    """Keeps the snapshot in a JSON file, replaced whole on every save."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[CheckIn]:
        if not self.path.exists():
            logger.debug(f"No snapshot file at {self.path}, starting empty")
            return []
        checkins = decode_snapshot(self.path.read_text(encoding="utf-8"))
        logger.debug(f"Loaded {len(checkins)} check-ins from {self.path}")
        return checkins

    def save(self, checkins: Sequence[CheckIn]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_text(encode_snapshot(checkins), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except Exception:
            logger.error(f"Failed to save snapshot to {self.path}", exc_info=True)
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(checkins)} check-ins to {self.path}")


def open_snapshot_store(db: Session) -> SnapshotStore:
    """Snapshot store selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "file":
        return JsonFileSnapshotStore(settings.STORAGE_FILE)
    return DatabaseSnapshotStore(db, settings.STORAGE_KEY)
