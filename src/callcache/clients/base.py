"""
Base class for JSON-over-HTTP clients.

Handles aiohttp session ownership and turns transport or decoding failures
into NetworkError.
"""

import asyncio
import json
from typing import Any

import aiohttp

from callcache import __version__
from callcache.core.exceptions import NetworkError


class JSONClient:
    """Shared session management and JSON fetching for backend clients."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float = 30,
    ):
        """Initialize the client.

        Args:
            session: Optional aiohttp session. If not provided, one will
                     be created when needed and closed by close().
            timeout: Request timeout in seconds.
        """
        self._session = session
        self._owns_session = session is None
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if we own it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "JSONClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _build_headers(self) -> dict[str, str]:
        """Build common request headers."""
        return {
            "User-Agent": f"callcache/{__version__}",
            "Accept": "application/json",
        }

    async def _fetch_json(self, url: str) -> Any:
        """GET ``url`` and decode the body as JSON.

        The body is decoded whatever the status code, since the backend
        reports application failures as JSON with ``success: false``. An
        empty body is a decoding failure.

        Raises:
            NetworkError: If the request fails or the body is not JSON.
        """
        try:
            async with self.session.get(url, headers=self._build_headers()) as resp:
                body = await resp.text()
                try:
                    return json.loads(body)
                except ValueError as e:
                    raise NetworkError(url, resp.status, details=f"Invalid JSON body: {e}")

        except aiohttp.ClientError as e:
            raise NetworkError(url, details=str(e))
        except asyncio.TimeoutError:
            raise NetworkError(url, details="Request timed out")
