"""
Cache policies for each resource class.

These are fixed at cache construction time and are not runtime-tunable.
All durations are in seconds.
"""

from dataclasses import dataclass

from callcache.core.models import ResourceKind

# Defaults for a cache built without explicit options
DEFAULT_MAX_SIZE = 100
DEFAULT_TTL = 5 * 60

# Item payloads other than the summary change rarely and cost more to refetch
ITEM_FULL_TTL = 60 * 60

# Page fetched by preload
PRELOAD_PAGE = 1
PRELOAD_PAGE_SIZE = 20

# Stats poller refresh interval
STATS_POLL_INTERVAL = 10.0


@dataclass(frozen=True)
class CachePolicy:
    """Capacity and default TTL for one resource class."""

    max_size: int
    ttl: float


POLICIES: dict[ResourceKind, CachePolicy] = {
    ResourceKind.LISTINGS: CachePolicy(max_size=50, ttl=10 * 60),
    ResourceKind.ITEMS: CachePolicy(max_size=100, ttl=30 * 60),
    ResourceKind.AGGREGATES: CachePolicy(max_size=10, ttl=15 * 60),
}
