"""
Caching client for the call-recording backend.

Serves listings, item analyses and dashboard aggregates from per-resource
in-memory caches and falls back to the backend on a miss. Only responses
whose ``success`` field is true are cached.

Concurrent misses for the same key are not coalesced: each one reaches the
backend and the last response to arrive is the one left in the cache.
"""

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import urlencode

import aiohttp

from callcache.cache.resources import ResourceCaches, shared_caches
from callcache.clients.base import JSONClient
from callcache.core.config import ITEM_FULL_TTL, PRELOAD_PAGE, PRELOAD_PAGE_SIZE
from callcache.core.models import CacheStats, ItemInclude, ResourceKind
from callcache.core.validation import (
    encode_path_segment,
    validate_identifier,
    validate_positive_int,
)

logger = logging.getLogger(__name__)


class CachingFetchClient(JSONClient):
    """Backend client with per-resource response caching."""

    LISTINGS_PATH = "/listings"
    ITEMS_PATH = "/items"
    AGGREGATES_PATH = "/aggregates"

    def __init__(
        self,
        base_url: Optional[str] = "",
        caches: Optional[ResourceCaches] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = 30,
    ):
        """Initialize the client.

        Args:
            base_url: Backend root URL. Empty means relative paths.
            caches: Cache partitions to use. Defaults to the process-wide
                    shared caches.
            session: Optional aiohttp session.
            timeout: Request timeout in seconds.
        """
        super().__init__(session, timeout)
        self.base_url = base_url or ""
        self.caches = caches if caches is not None else shared_caches

    # Cache keys

    @staticmethod
    def listings_key(page: int, page_size: int, search: Optional[str] = None) -> str:
        """Build the cache key for a listings page."""
        return f"listings_{page}_{page_size}_{search or 'all'}"

    @staticmethod
    def item_key(identifier: str, include: "str | ItemInclude" = ItemInclude.SUMMARY) -> str:
        """Build the cache key for one item and field subset."""
        return f"item_{identifier}_{include}"

    @staticmethod
    def aggregates_key(include_activity: bool = False) -> str:
        """Build the cache key for the aggregates, with or without activity."""
        return f"aggregates_{'true' if include_activity else 'false'}"

    # Fetching

    async def get_listings(
        self,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        force_refresh: bool = False,
    ) -> Any:
        """Fetch a page of recordings.

        Args:
            page: Page number, starting at 1.
            page_size: Number of entries per page.
            search: Optional search term.
            force_refresh: Skip the cache lookup and always hit the backend.

        Returns:
            The decoded response body.

        Raises:
            ValidationError: If page or page_size is not a positive integer.
            NetworkError: If the request fails.
        """
        validate_positive_int("page", page)
        validate_positive_int("page_size", page_size)

        params = {"page": page, "limit": page_size}
        if search:
            params["search"] = search

        return await self._cached_fetch(
            ResourceKind.LISTINGS,
            self.listings_key(page, page_size, search),
            self._url(self.LISTINGS_PATH, params),
            force_refresh,
        )

    async def get_item(
        self,
        identifier: str,
        include: "str | ItemInclude" = ItemInclude.SUMMARY,
        force_refresh: bool = False,
    ) -> Any:
        """Fetch one recording's analysis.

        Summaries are cached for the items default TTL, every other include
        for ITEM_FULL_TTL.

        Raises:
            ValidationError: If the identifier is empty or malformed.
            NetworkError: If the request fails.
        """
        validate_identifier(identifier)
        include = str(include)

        ttl = None if include == ItemInclude.SUMMARY.value else ITEM_FULL_TTL
        path = f"{self.ITEMS_PATH}/{encode_path_segment(identifier)}"

        return await self._cached_fetch(
            ResourceKind.ITEMS,
            self.item_key(identifier, include),
            self._url(path, {"include": include}),
            force_refresh,
            ttl=ttl,
        )

    async def get_aggregates(
        self,
        include_activity: bool = False,
        force_refresh: bool = False,
    ) -> Any:
        """Fetch dashboard aggregates, optionally with recent activity."""
        params = {"includeActivity": "true"} if include_activity else {}

        return await self._cached_fetch(
            ResourceKind.AGGREGATES,
            self.aggregates_key(include_activity),
            self._url(self.AGGREGATES_PATH, params),
            force_refresh,
        )

    async def _cached_fetch(
        self,
        kind: ResourceKind,
        key: str,
        url: str,
        force_refresh: bool,
        ttl: Optional[float] = None,
    ) -> Any:
        cache = self.caches.for_kind(kind)

        if not force_refresh:
            cached = cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %s: %s", kind, key)
                return cached

        logger.debug("Cache miss, fetching %s: %s", kind, key)
        data = await self._fetch_json(url)

        if _is_success(data):
            cache.set(key, data, ttl)

        return data

    def _url(self, path: str, params: dict[str, Any]) -> str:
        url = f"{self.base_url}{path}"
        if params:
            url += f"?{urlencode(params)}"
        return url

    # Maintenance

    def invalidate(self, resource: "str | ResourceKind", identifier: Optional[str] = None) -> None:
        """Drop cached entries for a resource class.

        Listings and aggregates are always cleared entirely. For items, an
        identifier removes just that item's entries for every known include;
        without one the whole items cache is cleared. Unknown resource names
        are ignored.
        """
        kind = ResourceKind.parse(resource)
        if kind is None:
            logger.debug("Ignoring invalidation of unknown resource %r", resource)
            return

        if kind is ResourceKind.ITEMS and identifier:
            for include in ItemInclude:
                self.caches.items.delete(self.item_key(identifier, include))
            logger.info("Cleared items cache for: %s", identifier)
            return

        self.caches.for_kind(kind).clear()
        logger.info("Cleared %s cache", kind)

    def stats(self) -> dict[str, CacheStats]:
        """Get statistics for the listings, items and aggregates caches."""
        return self.caches.stats()

    async def preload(self, subject_id: str) -> None:
        """Warm the caches with the first listings page and the aggregates.

        Best effort: failures are logged and never raised.
        """
        logger.info("Preloading data for: %s", subject_id)

        results = await asyncio.gather(
            self.get_listings(PRELOAD_PAGE, PRELOAD_PAGE_SIZE),
            self.get_aggregates(False),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        for error in failures:
            logger.error("Error preloading data: %s", error, exc_info=error)

        if not failures:
            logger.info("Data preloading completed")


def _is_success(data: Any) -> bool:
    return isinstance(data, dict) and bool(data.get("success"))
