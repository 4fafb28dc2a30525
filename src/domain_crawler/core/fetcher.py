"""HTTP fetcher implementation using httpx."""

import asyncio

import httpx

from ..exceptions import FetchError
from .protocols import Response

DEFAULT_USER_AGENT = "DomainCrawler/0.1 (+https://github.com/domain-crawler)"


class HttpFetcher:
    """Async HTTP fetcher using httpx with connection reuse."""

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )
        self.transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with double-checked locking."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        limits=self.limits,
                        headers={"User-Agent": self.user_agent},
                        follow_redirects=True,
                        transport=self.transport,
                    )
        return self._client

    async def fetch(self, url: str) -> Response:
        """GET a URL. Invalid URLs, transport errors and non-2xx statuses raise FetchError."""
        client = await self._get_client()
        try:
            request = client.build_request("GET", url)
            resp = await client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        try:
            resp.raise_for_status()
            content = await resp.aread()
        except httpx.HTTPStatusError as e:
            await resp.aclose()
            raise FetchError(url, f"HTTP {e.response.status_code} {e.response.reason_phrase}") from e
        except httpx.HTTPError as e:
            await resp.aclose()
            raise FetchError(url, str(e) or type(e).__name__) from e

        return Response(
            url=str(resp.url),
            status=resp.status_code,
            content=content,
            headers=dict(resp.headers),
            raw=resp,
        )

    async def release(self, response: Response | None) -> None:
        """Close the response stream."""
        if response is not None and response.raw is not None:
            await response.raw.aclose()

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
