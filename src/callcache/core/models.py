"""
Core data models for callcache.

Defines the resource classes served by the backend, the item field subsets,
and the statistics snapshot reported by each cache.
"""

from dataclasses import dataclass
from enum import Enum


class ResourceKind(Enum):
    """Resource classes, each backed by its own cache partition."""

    LISTINGS = "listings"  # Paged recording lists
    ITEMS = "items"  # Single recording analysis
    AGGREGATES = "aggregates"  # Dashboard totals

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | ResourceKind") -> "ResourceKind | None":
        """Resolve a resource name, returning None when it is unknown."""
        if isinstance(name, ResourceKind):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _LEGACY_NAMES.get(key)


# Names used by older dashboard callers
_LEGACY_NAMES = {
    "uploads": ResourceKind.LISTINGS,
    "analysis": ResourceKind.ITEMS,
    "analytics": ResourceKind.AGGREGATES,
}


class ItemInclude(Enum):
    """Field subsets the items endpoint can return."""

    SUMMARY = "summary"
    RESULT = "result"
    TRANSCRIPTION = "transcription"
    ALL = "all"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time statistics for one cache."""

    size: int
    valid_entries: int
    expired_entries: int
    max_size: int
    memory_usage: str

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for display or serialization."""
        return {
            "size": self.size,
            "valid_entries": self.valid_entries,
            "expired_entries": self.expired_entries,
            "max_size": self.max_size,
            "memory_usage": self.memory_usage,
        }
