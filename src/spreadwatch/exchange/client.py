"""
Async JSON-over-HTTPS client base.

Every upstream (exchange tickers, MEXC, DexScreener) goes through
this class:
- One session per client with connection pooling and keep-alive
- Fast JSON parsing with orjson
- Network and HTTP failures mapped onto a small exception hierarchy
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aiohttp
import orjson

from spreadwatch.config.constants import (
    CONNECTOR_LIMIT,
    CONNECTOR_LIMIT_PER_HOST,
    DEFAULT_HEADERS,
    KEEPALIVE_TIMEOUT,
)


class ExchangeClientError(Exception):
    """Base exception for upstream client errors."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class ExchangeAPIError(ExchangeClientError):
    """Exception for upstream error responses (HTTP status >= 400)."""

    pass


class UnknownExchangeError(ValueError):
    """Raised when an exchange identifier is not in the configured roster."""

    pass


class HttpClient:
    """
    Async HTTP client returning parsed JSON.

    Subclasses add the endpoint-specific calls. The session is created
    lazily so clients can be built outside a running event loop.
    """

    def __init__(
        self,
        base_url: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Prefix for relative endpoints.
            headers: Extra headers sent with every request.
        """
        self._base_url = base_url
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=CONNECTOR_LIMIT,
                limit_per_host=CONNECTOR_LIMIT_PER_HOST,
                keepalive_timeout=KEEPALIVE_TIMEOUT,
                enable_cleanup_closed=True,
            )

            self._session = aiohttp.ClientSession(
                connector=connector,
                headers=self._headers,
                json_serialize=lambda x: orjson.dumps(x).decode(),
            )

        return self._session

    async def close(self) -> None:
        """Close the client session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    @asynccontextmanager
    async def _request_context(self) -> AsyncIterator[aiohttp.ClientSession]:
        """Context manager for making requests."""
        session = await self._get_session()
        try:
            yield session
        except aiohttp.ClientError as e:
            raise ExchangeClientError(f"Network error: {e}") from e
        except asyncio.TimeoutError as e:
            raise ExchangeClientError("Request timed out") from e

    async def get_json(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Perform a GET request.

        Args:
            endpoint: Absolute URL, or path appended to the base URL.
            params: Query parameters.
            headers: Per-request headers.

        Returns:
            Parsed JSON response.

        Raises:
            ExchangeAPIError: On HTTP error status.
            ExchangeClientError: On network errors or invalid JSON.
        """
        url = endpoint if endpoint.startswith("http") else f"{self._base_url}{endpoint}"

        async with self._request_context() as session:
            async with session.get(url, params=params, headers=headers) as response:
                return await self._handle_response(response)

    async def _handle_response(self, response: aiohttp.ClientResponse) -> Any:
        """Parse and validate response."""
        body = await response.read()

        if response.status >= 400:
            raise ExchangeAPIError(
                f"HTTP {response.status}: {body[:200].decode(errors='replace')}",
                code=response.status,
            )

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise ExchangeClientError(f"Invalid JSON response: {e}") from e
