"""httpx adapter for reading the NameNode JMX servlet."""

import asyncio
from types import TracebackType

import httpx

from namenode_exporter.core.exceptions import FetchError
from namenode_exporter.version import __version__

USER_AGENT = f"namenode_exporter/{__version__}"


class HttpxStatusFetcher:
    """StatusFetcherPort implementation backed by a shared httpx.AsyncClient.

    Every fetch issues exactly one GET. The timeout bounds the whole
    request, from acquiring a pooled connection to reading the last byte.
    The response is always drained and closed so the connection can be
    reused by the next scrape.

    Example:
        ```python
        async with HttpxStatusFetcher("http://namenode:50070/jmx", 5.0) as fetcher:
            body = await fetcher.fetch()
        ```
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            url: Absolute HTTP(S) URL of the JMX servlet.
            timeout: Seconds allowed for one complete request.
            client: Shared client to use. When omitted the fetcher creates
                and owns one.
            transport: Transport for the owned client (tests use
                httpx.MockTransport). Ignored when ``client`` is given.
        """
        self.url = url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        )

    async def __aenter__(self) -> "HttpxStatusFetcher":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self) -> bytes:
        """Return the body of a 200 response.

        Raises:
            FetchError: Connection failure, timeout, non-200 status or a
                failure while reading the body.
        """
        try:
            async with asyncio.timeout(self.timeout):
                return await self._get()
        except TimeoutError as e:
            raise FetchError(
                f"request to {self.url} timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"{type(e).__name__}: {e}") from e

    async def _get(self) -> bytes:
        async with self._client.stream("GET", self.url) as response:
            # Read the body on every path so the connection returns to the pool
            body = await response.aread()
            if response.status_code != httpx.codes.OK:
                raise FetchError(
                    f"HTTP status code {response.status_code}",
                    status_code=response.status_code,
                )
            return body
