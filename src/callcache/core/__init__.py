"""
Core module for callcache.

Contains data models, cache policies, validation and exceptions.
"""

from callcache.core.config import POLICIES, CachePolicy
from callcache.core.exceptions import CallCacheError, NetworkError, ValidationError
from callcache.core.models import CacheStats, ItemInclude, ResourceKind

__all__ = [
    # Models
    "CacheStats",
    "ItemInclude",
    "ResourceKind",
    # Config
    "CachePolicy",
    "POLICIES",
    # Exceptions
    "CallCacheError",
    "NetworkError",
    "ValidationError",
]
