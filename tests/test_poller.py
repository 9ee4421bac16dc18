"""
Tests for the cache statistics poller.
"""

import asyncio
import logging
from unittest.mock import MagicMock

import pytest

from callcache.monitoring.poller import StatsPoller


@pytest.fixture
def stats_client():
    """Client double whose stats() returns an increasing counter."""
    client = MagicMock()
    client.stats.side_effect = lambda: {"calls": client.stats.call_count}
    return client


class TestStatsPoller:
    """Tests for StatsPoller."""

    def test_initial_snapshot(self, stats_client):
        poller = StatsPoller(stats_client)
        assert poller.latest == {"calls": 1}
        assert poller.interval == 10.0
        assert not poller.running

    def test_refresh(self, stats_client):
        updates = []
        poller = StatsPoller(stats_client, on_update=updates.append)

        snapshot = poller.refresh()

        assert snapshot == {"calls": 2}
        assert poller.latest == snapshot
        assert updates == [snapshot]

    @pytest.mark.asyncio
    async def test_polls_until_stopped(self, stats_client):
        poller = StatsPoller(stats_client, interval=0.01)
        poller.start()
        assert poller.running

        await asyncio.sleep(0.1)
        await poller.stop()

        assert not poller.running
        calls_at_stop = stats_client.stats.call_count
        assert calls_at_stop >= 3
        assert poller.latest == {"calls": calls_at_stop}

        await asyncio.sleep(0.05)
        assert stats_client.stats.call_count == calls_at_stop

    @pytest.mark.asyncio
    async def test_start_twice_runs_one_task(self, stats_client):
        poller = StatsPoller(stats_client, interval=0.01)
        poller.start()
        task = poller._task
        poller.start()
        assert poller._task is task
        await poller.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self, stats_client):
        poller = StatsPoller(stats_client)
        await poller.stop()
        assert not poller.running

    @pytest.mark.asyncio
    async def test_context_manager(self, stats_client):
        updates = []
        async with StatsPoller(stats_client, interval=0.01, on_update=updates.append) as poller:
            assert poller.running
            await asyncio.sleep(0.05)

        assert not poller.running
        assert updates

    @pytest.mark.asyncio
    async def test_with_real_client(self, client, caches):
        caches.listings.set("listings_1_20_all", {"success": True})
        async with StatsPoller(client, interval=0.01) as poller:
            caches.items.set("item_abc_summary", {"success": True})
            await asyncio.sleep(0.05)

        assert poller.latest["listings"].size == 1
        assert poller.latest["items"].size == 1


class TestStatsPollerErrors:
    """Tests for failures raised while refreshing."""

    @pytest.mark.asyncio
    async def test_callback_error_does_not_stop_polling(self, stats_client, caplog):
        updates = []

        def on_update(snapshot):
            updates.append(snapshot)
            if len(updates) == 1:
                raise RuntimeError("boom")

        poller = StatsPoller(stats_client, interval=0.01, on_update=on_update)
        with caplog.at_level(logging.ERROR, logger="callcache"):
            poller.start()
            await asyncio.sleep(0.1)
            assert poller.running
            await poller.stop()

        assert len(updates) >= 3
        assert poller.latest == updates[-1]
        assert "Error refreshing cache statistics" in caplog.text

    @pytest.mark.asyncio
    async def test_stats_error_does_not_stop_polling(self, caplog):
        client = MagicMock()
        client.stats.return_value = {"calls": 0}
        poller = StatsPoller(client, interval=0.01)
        client.stats.side_effect = [ValueError("bad"), {"calls": 2}, {"calls": 3}] + [{"calls": 4}] * 100

        with caplog.at_level(logging.ERROR, logger="callcache"):
            async with poller:
                await asyncio.sleep(0.1)

        assert poller.latest["calls"] >= 2
        assert "Error refreshing cache statistics" in caplog.text
