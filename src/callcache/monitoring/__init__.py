"""
Monitoring helpers for cache statistics.
"""

from callcache.monitoring.poller import StatsPoller

__all__ = ["StatsPoller"]
