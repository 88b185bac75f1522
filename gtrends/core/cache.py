"""
cache.py — Process-lifetime cache for the two reference trees.

Categories and locations change rarely and are expensive to fetch, so a
client keeps the first tree it downloads. Each slot has its own lock and
the two are never held together.

Callers check, fetch, then store. Two cold callers racing will both hit
the network and the second store wins; the trees are immutable reference
data, so either copy is correct.
"""

import threading
from typing import Generic, Optional, TypeVar

from gtrends.models.reference import CategoryNode, LocationNode

T = TypeVar("T")


class CacheSlot(Generic[T]):
    """A single lock-guarded value. None means not yet populated."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[T] = None

    def get(self) -> Optional[T]:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._lock:
            self._value = value

    def clear(self) -> None:
        with self._lock:
            self._value = None


class ReferenceCache:
    """Holds the category and location trees for one client."""

    def __init__(self) -> None:
        self.categories: CacheSlot[CategoryNode] = CacheSlot()
        self.locations: CacheSlot[LocationNode] = CacheSlot()

    def clear(self) -> None:
        self.categories.clear()
        self.locations.clear()
