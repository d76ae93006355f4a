"""Internal time-based cache for read-only upstream queries."""

from __future__ import annotations

import asyncio
import copy
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class _CacheEntry(Generic[T]):
    value: T
    stored_at: float


class TimedCache(Generic[T]):
    """Hold one value for ``ttl`` seconds.

    Concurrent :meth:`get_or_fetch` calls share a single in-flight fetch.
    A ``ttl`` of ``0`` disables caching.
    """

    def __init__(self, ttl: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entry: _CacheEntry[T] | None = None
        self._lock = asyncio.Lock()

    def _fresh(self) -> _CacheEntry[T] | None:
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._ttl:
            return None
        return entry

    def get(self) -> T | None:
        entry = self._fresh()
        if entry is None:
            return None
        return copy.deepcopy(entry.value)

    def put(self, value: T) -> T:
        self._entry = _CacheEntry(value=value, stored_at=self._clock())
        return copy.deepcopy(value)

    def age_seconds(self) -> float | None:
        if self._entry is None:
            return None
        return self._clock() - self._entry.stored_at

    async def get_or_fetch(self, fetch: Callable[[], Awaitable[T]], *, force_refresh: bool = False) -> T:
        """Return the cached value, fetching it when missing or stale.

        Fetch errors propagate and leave any previous entry in place.
        """
        if not force_refresh:
            cached = self._fresh()
            if cached is not None:
                return copy.deepcopy(cached.value)

        async with self._lock:
            # Another waiter may have refreshed while we queued.
            cached = self._fresh()
            if cached is not None and not force_refresh:
                return copy.deepcopy(cached.value)
            value = await fetch()
            return self.put(value)
