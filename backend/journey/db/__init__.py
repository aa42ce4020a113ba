"""Record store implementations."""

from journey.db.store import InMemoryRecordStore, RecordStore

__all__ = [
    "InMemoryRecordStore",
    "RecordStore",
]
