"""
Pytest fixtures and configuration for callcache tests.

Provides a controllable clock, a fake aiohttp session and isolated caches.
"""

import asyncio
import json
from typing import Any

import pytest

from callcache.cache.resources import ResourceCaches, shared_caches
from callcache.clients.backend import CachingFetchClient

BASE_URL = "http://localhost"


# =============================================================================
# Fakes
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, body: Any = None, status: int = 200, raw: str | None = None):
        self.body = body
        self.status = status
        self.raw = raw

    async def text(self) -> str:
        # Yield once so concurrent requests genuinely interleave
        await asyncio.sleep(0)
        if self.raw is not None:
            return self.raw
        return json.dumps(self.body)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FakeSession:
    """Records GET requests and answers them by URL fragment.

    A registered response may be a FakeResponse, an exception to raise, or a
    list of those consumed one per request.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.headers: list[dict] = []
        self.routes: list[tuple[str, Any]] = []
        self.closed = False

    def respond(self, fragment: str, response: Any) -> None:
        self.routes.append((fragment, response))

    def get(self, url: str, headers: dict | None = None) -> FakeResponse:
        self.calls.append(url)
        self.headers.append(headers or {})

        for fragment, response in self.routes:
            if fragment in url:
                if isinstance(response, list):
                    response = response.pop(0) if len(response) > 1 else response[0]
                if isinstance(response, BaseException):
                    raise response
                return response

        raise AssertionError(f"Unexpected request: {url}")

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_shared_caches():
    """Keep the process-wide caches from leaking between tests."""
    shared_caches.clear()
    yield
    shared_caches.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def caches(clock: FakeClock) -> ResourceCaches:
    """Isolated caches driven by the fake clock."""
    return ResourceCaches.create(clock=clock)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(caches: ResourceCaches, session: FakeSession) -> CachingFetchClient:
    """Client wired to isolated caches and the fake session."""
    return CachingFetchClient(BASE_URL, caches=caches, session=session)


@pytest.fixture
def listings_response() -> dict[str, Any]:
    return {
        "success": True,
        "data": [
            {"id": "rec_1", "fileName": "call-2024-01-10.mp3", "status": "analyzed"},
            {"id": "rec_2", "fileName": "call-2024-01-11.mp3", "status": "pending"},
        ],
        "pagination": {"page": 1, "limit": 20, "total": 2},
    }


@pytest.fixture
def item_response() -> dict[str, Any]:
    return {
        "success": True,
        "data": {"id": "rec_1", "summary": "Customer asked about renewal pricing."},
    }


@pytest.fixture
def aggregates_response() -> dict[str, Any]:
    return {
        "success": True,
        "data": {"totalUploads": 42, "analyzed": 40, "averageSentiment": 0.62},
    }
