"""
Tests for the high-level convenience API.
"""

import callcache
from callcache import api
from callcache.cache.resources import shared_caches


class TestDefaultClient:
    """Tests for get_default_client."""

    def test_returns_singleton(self, monkeypatch):
        monkeypatch.setattr(api, "_default_client", None)
        first = api.get_default_client("http://backend")
        second = api.get_default_client("http://ignored")
        assert first is second
        assert first.base_url == "http://backend"

    def test_uses_shared_caches(self, monkeypatch):
        monkeypatch.setattr(api, "_default_client", None)
        assert api.get_default_client().caches is shared_caches


class TestSharedCacheHelpers:
    """Tests for clear_all_caches and cache_stats."""

    def test_clear_all_caches(self):
        shared_caches.listings.set("key1", {})
        shared_caches.items.set("key2", {})
        shared_caches.aggregates.set("key3", {})

        api.clear_all_caches()

        assert shared_caches.listings.stats().size == 0
        assert shared_caches.items.stats().size == 0
        assert shared_caches.aggregates.stats().size == 0

    def test_cache_stats(self):
        shared_caches.items.set("item_abc_summary", {"success": True})

        stats = api.cache_stats()

        assert stats["items"]["size"] == 1
        assert stats["items"]["max_size"] == 100
        assert stats["listings"]["size"] == 0
        assert stats["aggregates"]["max_size"] == 10

    def test_shared_caches_are_independent(self):
        shared_caches.listings.set("listings-key", {"data": "listings"})
        shared_caches.items.set("items-key", {"data": "items"})

        assert not shared_caches.items.has("listings-key")
        assert not shared_caches.aggregates.has("items-key")


class TestPackageExports:
    """Tests for the top-level package namespace."""

    def test_version(self):
        assert callcache.__version__ == "0.1.0"

    def test_exports(self):
        for name in callcache.__all__:
            assert hasattr(callcache, name)
