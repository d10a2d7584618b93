"""
Handles the low-level fetching of link content over HTTP.
"""

import asyncio
import logging
from dataclasses import dataclass

import aiohttp

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """The status code and body of a completed HTTP exchange."""

    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return self.status == 200


class HttpFetcher:
    """
    Fetches whole response bodies with a single aiohttp session.

    Error statuses are not raised: their body is returned alongside the status
    so the caller can decide what to do with it. Network-level failures yield
    ``None`` instead of an exception.

    Usage:
        async with HttpFetcher() as fetcher:
            result = await fetcher.fetch("https://example.com/image.jpg")
    """

    def __init__(self, session: aiohttp.ClientSession | None = None):
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=1,
                ttl_dns_cache=600,  # 10 minutes
                enable_cleanup_closed=True,
            )
            self._session = aiohttp.ClientSession(connector=connector)
            self._owns_session = True
            log.debug("Created HTTP session for link fetching.")
        return self._session

    async def fetch(self, url: str) -> FetchResult | None:
        """
        Downloads the full body of a URL.

        Redirects are followed, but the reported status is the one of the first
        response in the chain, so a redirected link reports 301/302 and never
        counts as a plain success.

        Returns:
            A FetchResult for any HTTP response, including error statuses, or
            None if no response was received.
        """
        session = await self._get_session()
        try:
            async with session.get(url, allow_redirects=True) as response:
                body = await response.read()
                first = response.history[0] if response.history else response
                return FetchResult(status=first.status, body=body)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            log.debug(f"Fetching '{url}' failed: {e}")
            return None

    async def close(self) -> None:
        """Closes the session if this fetcher created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            log.debug("HTTP session closed.")
        self._session = None

    async def __aenter__(self) -> "HttpFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.close()
        return False
