"""
Memo tables for the recursive surreal operations.

Every table is a pure-function cache: the same key always maps to the same
value, so two threads racing to fill one entry both compute the identical
result and the second write is merely redundant. The lock is held for a
single lookup or insert, never while the value is being computed, so a
recursive computation can re-enter its own table freely.
"""

from __future__ import annotations
import threading
from typing import Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoTable(Generic[K, V]):
    """Lock-guarded dictionary with hit/miss counters."""

    def __init__(self, name: str):
        self.name = name
        self._entries: Dict[K, V] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: K) -> Optional[V]:
        """Return the memoized value, or None if the key was never stored."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._entries[key] = value

    def __contains__(self, key: K) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoTable({self.name!r}, size={len(self)}, hits={self.hits}, misses={self.misses})"
