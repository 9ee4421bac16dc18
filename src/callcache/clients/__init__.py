"""
Backend clients.

Provides an async caching client for the call-recording backend.
"""

from callcache.clients.base import JSONClient
from callcache.clients.backend import CachingFetchClient

__all__ = ["JSONClient", "CachingFetchClient"]
