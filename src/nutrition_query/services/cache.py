"""Bounded TTL cache used for external lookup results."""

import time
from collections.abc import Callable
from typing import Protocol

from cachetools import TTLCache


class Cache(Protocol):
    """Key-value cache whose entries expire after a fixed TTL."""

    def get(self, key: str) -> object | None:
        """Return the cached value, or None if missing or expired."""

    def set(self, key: str, value: object) -> None:
        """Store a value until the cache TTL elapses."""


class InMemoryCache(Cache):
    """Process-local cache bounded in size and age.

    Expired entries are purged on every write; when full, the least recently
    used entry is evicted.
    """

    def __init__(
        self,
        maxsize: int = 1024,
        ttl_seconds: float = 3600,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: TTLCache[str, object] = TTLCache(
            maxsize=maxsize, ttl=ttl_seconds, timer=timer
        )

    def get(self, key: str) -> object | None:
        return self._entries.get(key)

    def set(self, key: str, value: object) -> None:
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)
