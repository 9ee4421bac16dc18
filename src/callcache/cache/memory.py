"""
In-memory bounded TTL cache.

Each entry carries its own expiry. Expired entries are purged lazily when
they are next read; there is no background sweep. When the cache is full the
oldest-inserted entry is evicted (FIFO, not LRU).
"""

import json
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from callcache.core.config import DEFAULT_MAX_SIZE, DEFAULT_TTL
from callcache.core.models import CacheStats

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value with its insertion and expiry times."""

    data: T
    inserted_at: float
    expires_at: float


class BoundedTTLCache(Generic[T]):
    """Key/value store with per-entry expiry and a fixed maximum size.

    Never raises: a ``max_size`` of 0 turns the cache into a pass-through that
    stores nothing.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            max_size: Maximum number of stored entries, expired ones included.
            ttl: Default time-to-live in seconds.
            clock: Source of the current time in seconds.
        """
        self.max_size = max(max_size, 0)
        self.default_ttl = ttl
        self._clock = clock
        # dict preserves insertion order, which drives eviction
        self._entries: dict[str, CacheEntry[T]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        """Store a value under ``key``.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time-to-live in seconds. Uses the default if not specified.
        """
        if self.max_size == 0:
            return

        now = self._clock()
        expires_at = now + (self.default_ttl if ttl is None else ttl)

        # Replacing an existing key keeps its original insertion position
        if key not in self._entries and len(self._entries) >= self.max_size:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]

        self._entries[key] = CacheEntry(data=value, inserted_at=now, expires_at=expires_at)

    def get(self, key: str) -> Optional[T]:
        """Get a value if present and not expired.

        Returns:
            The cached value, or None if missing or expired.
        """
        entry = self._live_entry(key)
        return entry.data if entry is not None else None

    def has(self, key: str) -> bool:
        """Return True if ``key`` holds a live entry."""
        return self._live_entry(key) is not None

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def keys(self) -> list[str]:
        """Return stored keys in insertion order, expired ones included."""
        return list(self._entries)

    def stats(self) -> CacheStats:
        """Get cache statistics.

        Serializes every entry to estimate memory use, so keep this off
        per-request paths.
        """
        now = self._clock()
        valid = sum(1 for entry in self._entries.values() if entry.expires_at > now)
        size = len(self._entries)

        return CacheStats(
            size=size,
            valid_entries=valid,
            expired_entries=size - valid,
            max_size=self.max_size,
            memory_usage=format_size(self._approximate_size()),
        )

    def _live_entry(self, key: str) -> Optional[CacheEntry[T]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() > entry.expires_at:
            del self._entries[key]
            return None
        return entry

    def _approximate_size(self) -> int:
        payload = [
            [key, {"data": e.data, "inserted_at": e.inserted_at, "expires_at": e.expires_at}]
            for key, e in self._entries.items()
        ]
        return len(json.dumps(payload, default=str))


def format_size(size_bytes: int) -> str:
    """Render a byte count as B, KB or MB."""
    if size_bytes < 1024:
        return f"{size_bytes}B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f}KB"
    return f"{size_bytes / (1024 * 1024):.1f}MB"
