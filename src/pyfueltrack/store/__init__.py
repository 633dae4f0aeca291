"""Record store layer.

The tracker reads snapshots from a :class:`RecordStore`; the in-memory
implementation serialises access behind a single lock.
"""

from pyfueltrack.store.base import RecordStore
from pyfueltrack.store.memory import InMemoryRecordStore

__all__ = ["InMemoryRecordStore", "RecordStore"]
