"""
Name Cache - Memo of resolved node names.

Keys combine the record id with the raw node name: wildcard items share a
record id across many URL instances, so the record id alone would make
distinct nodes collapse onto one cached name.
"""
import threading
import uuid
from typing import Dict, Optional

from core.models import EMPTY_RECORD_ID


class NameCache:
    """Unbounded, thread-safe name cache scoped to one node factory."""

    def __init__(self):
        self._names: Dict[str, str] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_key(record_id: uuid.UUID, raw_name: str) -> str:
        return f"{record_id}{raw_name}"

    def get(self, record_id: uuid.UUID, raw_name: str) -> Optional[str]:
        """Get a cached name, or None on a miss."""
        with self._lock:
            return self._names.get(self.make_key(record_id, raw_name))

    def put(self, record_id: uuid.UUID, raw_name: str, name: str) -> None:
        """Store a name. Nodes without a backing item are never cached."""
        if record_id == EMPTY_RECORD_ID:
            return
        with self._lock:
            self._names[self.make_key(record_id, raw_name)] = name

    def clear(self) -> None:
        with self._lock:
            self._names.clear()

    def __contains__(self, key) -> bool:
        record_id, raw_name = key
        with self._lock:
            return self.make_key(record_id, raw_name) in self._names

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)
