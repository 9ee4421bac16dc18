"""
Cache module for storing backend responses in memory.

Provides a bounded TTL cache and the per-resource partitions built from it.
"""

from callcache.cache.memory import BoundedTTLCache, CacheEntry
from callcache.cache.resources import ResourceCaches, shared_caches

__all__ = ["BoundedTTLCache", "CacheEntry", "ResourceCaches", "shared_caches"]
