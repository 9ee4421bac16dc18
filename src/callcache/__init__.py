"""
callcache

Bandwidth-saving client for a call-recording analysis backend. Responses for
recording listings, per-recording analyses and dashboard aggregates are kept
in bounded in-memory caches with per-resource TTLs.

Quick Start:
    >>> import asyncio
    >>> from callcache import CachingFetchClient, ResourceCaches
    >>> async def main():
    ...     async with CachingFetchClient("https://calls.example.com/api",
    ...                                   caches=ResourceCaches.create()) as client:
    ...         page = await client.get_listings(1, 20)
    ...         item = await client.get_item("rec_42", include="result")
    ...         client.invalidate("items", "rec_42")
    ...         return client.stats()
    >>> stats = asyncio.run(main())
"""

__version__ = "0.1.0"

# High-level API
from callcache.api import cache_stats, clear_all_caches, get_default_client

# Caches
from callcache.cache import BoundedTTLCache, CacheEntry, ResourceCaches, shared_caches

# Clients
from callcache.clients import CachingFetchClient

# Exceptions
from callcache.core.exceptions import CallCacheError, NetworkError, ValidationError

# Data models
from callcache.core.models import CacheStats, ItemInclude, ResourceKind
from callcache.monitoring import StatsPoller

__all__ = [
    # Version
    "__version__",
    # High-level API
    "get_default_client",
    "clear_all_caches",
    "cache_stats",
    # Caches
    "BoundedTTLCache",
    "CacheEntry",
    "ResourceCaches",
    "shared_caches",
    # Clients
    "CachingFetchClient",
    "StatsPoller",
    # Models
    "CacheStats",
    "ItemInclude",
    "ResourceKind",
    # Exceptions
    "CallCacheError",
    "NetworkError",
    "ValidationError",
]
