"""Models package - Import all models for SQLAlchemy registration."""
from wellness.models.snapshot import StorageSnapshot

__all__ = [
    "StorageSnapshot",
]
