"""A dictionary guarded by a lock so that many threads can share it."""

from __future__ import annotations

import threading
from typing import Any, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ConcurrentSafeMap(Generic[K, V]):
    """A thread-safe mapping with set, get, delete and membership checks."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[K, V] = {}

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock:
            self._data[key] = value

    def get(self, key: K, default: Any = None) -> V | Any:
        """Return the value for ``key``, or ``default`` when it is absent."""
        with self._lock:
            return self._data.get(key, default)

    def delete(self, key: K) -> None:
        """Remove ``key``; removing a missing key does nothing."""
        with self._lock:
            self._data.pop(key, None)

    def exists(self, key: K) -> bool:
        """Return whether ``key`` is present."""
        with self._lock:
            return key in self._data

    def keys(self) -> list[K]:
        """Return a snapshot of the keys currently stored."""
        with self._lock:
            return list(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data