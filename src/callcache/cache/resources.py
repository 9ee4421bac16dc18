"""
Per-resource cache partitions.

Holds one BoundedTTLCache per resource class, configured from POLICIES.
``shared_caches`` is the process-wide set that clients use unless they are
given their own.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable

from callcache.cache.memory import BoundedTTLCache
from callcache.core.config import POLICIES
from callcache.core.models import CacheStats, ResourceKind


@dataclass
class ResourceCaches:
    """The listings, items and aggregates caches."""

    listings: BoundedTTLCache[Any]
    items: BoundedTTLCache[Any]
    aggregates: BoundedTTLCache[Any]

    @classmethod
    def create(cls, clock: Callable[[], float] = time.monotonic) -> "ResourceCaches":
        """Build a fresh, isolated set of caches from the resource policies."""

        def build(kind: ResourceKind) -> BoundedTTLCache[Any]:
            policy = POLICIES[kind]
            return BoundedTTLCache(max_size=policy.max_size, ttl=policy.ttl, clock=clock)

        return cls(
            listings=build(ResourceKind.LISTINGS),
            items=build(ResourceKind.ITEMS),
            aggregates=build(ResourceKind.AGGREGATES),
        )

    def for_kind(self, kind: ResourceKind) -> BoundedTTLCache[Any]:
        """Return the cache backing ``kind``."""
        return getattr(self, kind.value)

    def clear(self) -> None:
        """Clear all three caches."""
        self.listings.clear()
        self.items.clear()
        self.aggregates.clear()

    def stats(self) -> dict[str, CacheStats]:
        """Get statistics for each cache, keyed by resource name."""
        return {kind.value: self.for_kind(kind).stats() for kind in ResourceKind}


shared_caches = ResourceCaches.create()
