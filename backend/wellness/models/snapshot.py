"""
Snapshot model for whole-collection check-in storage.
"""
from sqlalchemy import Column, String, Text, UniqueConstraint
from wellness.db.base import BaseModel


class StorageSnapshot(BaseModel):
    """One serialized JSON payload per storage key."""
    __tablename__ = "storage_snapshots"

    key = Column(String(100), nullable=False, index=True)
    payload = Column(Text, nullable=False, default="[]")  # JSON array of check-ins

    # Unique constraint: the payload is replaced whole, never appended
    __table_args__ = (
        UniqueConstraint('key', name='uq_storage_snapshot_key'),
    )
