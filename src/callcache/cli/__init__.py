"""
Command-line interface for callcache.

Provides Click-based commands for fetching listings, items and aggregates
through the cache and for warming the caches.
"""

from callcache.cli.main import cli

__all__ = ["cli"]
