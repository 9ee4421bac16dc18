"""
Periodic cache statistics polling.

Keeps the latest stats snapshot of a client fresh on a timer, for dashboards
or log output. The poller owns its task and cancels it on stop().
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from callcache.core.config import STATS_POLL_INTERVAL
from callcache.core.models import CacheStats

logger = logging.getLogger(__name__)

StatsSnapshot = dict[str, CacheStats]


class StatsPoller:
    """Refreshes a client's cache statistics every ``interval`` seconds."""

    def __init__(
        self,
        client: Any,
        interval: float = STATS_POLL_INTERVAL,
        on_update: Optional[Callable[[StatsSnapshot], None]] = None,
    ):
        """Initialize the poller and take a first snapshot.

        Args:
            client: Anything with a ``stats()`` method, usually a
                    CachingFetchClient.
            interval: Seconds between refreshes.
            on_update: Optional callback invoked with each new snapshot.
        """
        self.client = client
        self.interval = interval
        self.on_update = on_update
        self.latest: StatsSnapshot = client.stats()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling. Does nothing if already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Cancel the polling task and wait for it to finish."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    def refresh(self) -> StatsSnapshot:
        """Take a snapshot now and notify the callback."""
        self.latest = self.client.stats()
        if self.on_update is not None:
            self.on_update(self.latest)
        return self.latest

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.refresh()
            except Exception:
                logger.exception("Error refreshing cache statistics")

    async def __aenter__(self) -> "StatsPoller":
        self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.stop()
