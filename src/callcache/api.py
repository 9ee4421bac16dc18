"""
High-level convenience API for callcache.

Wraps a module-level default client over the shared caches, so call sites
across an application converge on one warm cache.

Example:
    import asyncio
    from callcache import get_default_client

    async def main():
        client = get_default_client()
        page = await client.get_listings(1, 20)
        print(page["success"])
        await client.close()

    asyncio.run(main())
"""

import logging
from typing import Optional

from callcache.cache.resources import shared_caches
from callcache.clients.backend import CachingFetchClient

logger = logging.getLogger(__name__)

_default_client: Optional[CachingFetchClient] = None


def get_default_client(base_url: str = "") -> CachingFetchClient:
    """Return the module-level client, creating it on first use.

    Args:
        base_url: Backend root URL, only used when the client is created.
    """
    global _default_client
    if _default_client is None:
        _default_client = CachingFetchClient(base_url, caches=shared_caches)
    return _default_client


def clear_all_caches() -> None:
    """Clear the shared listings, items and aggregates caches."""
    shared_caches.clear()
    logger.info("Cleared all caches")


def cache_stats() -> dict[str, dict]:
    """Get statistics for the shared caches as plain dictionaries."""
    return {name: stats.to_dict() for name, stats in shared_caches.stats().items()}
