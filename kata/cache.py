"""Bounded key-value caches with LRU, LFU and FIFO eviction."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Hashable
from enum import Enum
from typing import Any


class CachePolicy(Enum):
    """The eviction policy of a cache."""

    LRU = 0
    LFU = 1
    FIFO = 2


class Cache(ABC):
    """A bounded mapping that evicts entries when full."""

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` on a miss."""
        value, found = self.lookup(key)
        return value if found else default

    @abstractmethod
    def lookup(self, key: Hashable) -> tuple[Any, bool]:
        """Return ``(value, True)`` on a hit and ``(None, False)`` on a miss."""

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting an entry if the cache is full."""

    @abstractmethod
    def delete(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was present."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""

    @abstractmethod
    def __len__(self) -> int:
        """The number of entries stored."""

    @property
    @abstractmethod
    def capacity(self) -> int:
        """The largest number of entries the cache holds."""

    @property
    @abstractmethod
    def hit_rate(self) -> float:
        """The share of lookups that were hits, or 0.0 before any lookup."""


class _CountingCache(Cache):
    """Shared capacity handling and hit counting."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._capacity = capacity
        self._hits = 0
        self._misses = 0

    def _count(self, found: bool) -> None:
        if found:
            self._hits += 1
        else:
            self._misses += 1

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def hit_rate(self) -> float:
        total = self._hits + self._misses
        return self._hits / total if total else 0.0


class LRUCache(_CountingCache):
    """Evicts the entry used least recently."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def lookup(self, key: Hashable) -> tuple[Any, bool]:
        found = key in self._entries
        self._count(found)
        if not found:
            return None, False
        self._entries.move_to_end(key)
        return self._entries[key], True

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity == 0:
            return
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def delete(self, key: Hashable) -> bool:
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class LFUCache(_CountingCache):
    """Evicts the entry used least often; ties go to the oldest."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._values: dict[Hashable, Any] = {}
        self._counts: dict[Hashable, int] = {}
        self._buckets: dict[int, OrderedDict[Hashable, None]] = {}

    def _unlink(self, key: Hashable) -> int:
        count = self._counts.pop(key)
        bucket = self._buckets[count]
        del bucket[key]
        if not bucket:
            del self._buckets[count]
        return count

    def _link(self, key: Hashable, count: int) -> None:
        self._counts[key] = count
        self._buckets.setdefault(count, OrderedDict())[key] = None

    def _touch(self, key: Hashable) -> None:
        self._link(key, self._unlink(key) + 1)

    def lookup(self, key: Hashable) -> tuple[Any, bool]:
        found = key in self._values
        self._count(found)
        if not found:
            return None, False
        self._touch(key)
        return self._values[key], True

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity == 0:
            return
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) >= self._capacity:
            lowest = min(self._buckets)
            victim = next(iter(self._buckets[lowest]))
            self._unlink(victim)
            del self._values[victim]
        self._values[key] = value
        self._link(key, 1)

    def delete(self, key: Hashable) -> bool:
        if key not in self._values:
            return False
        self._unlink(key)
        del self._values[key]
        return True

    def clear(self) -> None:
        self._values.clear()
        self._counts.clear()
        self._buckets.clear()

    def __len__(self) -> int:
        return len(self._values)


class FIFOCache(_CountingCache):
    """Evicts the entry inserted first; lookups do not change the order."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._entries: dict[Hashable, Any] = {}

    def lookup(self, key: Hashable) -> tuple[Any, bool]:
        found = key in self._entries
        self._count(found)
        return (self._entries[key], True) if found else (None, False)

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity == 0:
            return
        if key not in self._entries and len(self._entries) >= self._capacity:
            del self._entries[next(iter(self._entries))]
        self._entries[key] = value

    def delete(self, key: Hashable) -> bool:
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class ThreadSafeCache(Cache):
    """Wraps another cache so that it can be shared between threads."""

    def __init__(self, cache: Cache) -> None:
        self._cache = cache
        self._lock = threading.RLock()

    def lookup(self, key: Hashable) -> tuple[Any, bool]:
        with self._lock:
            return self._cache.lookup(key)

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache.put(key, value)

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._cache.delete(key)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    @property
    def capacity(self) -> int:
        with self._lock:
            return self._cache.capacity

    @property
    def hit_rate(self) -> float:
        with self._lock:
            return self._cache.hit_rate


_FACTORIES = {
    CachePolicy.LRU: LRUCache,
    CachePolicy.LFU: LFUCache,
    CachePolicy.FIFO: FIFOCache,
}


def new_cache(policy: CachePolicy, capacity: int) -> Cache:
    """Return an empty cache of the given policy and capacity."""
    return _FACTORIES[CachePolicy(policy)](capacity)


def new_thread_safe_cache(policy: CachePolicy, capacity: int) -> ThreadSafeCache:
    """Return an empty thread-safe cache of the given policy and capacity."""
    return ThreadSafeCache(new_cache(policy, capacity))