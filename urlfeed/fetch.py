"""HTTP fetching of the resource behind a URL."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from urlfeed.config import Settings
from urlfeed.errors import FetchError

logger = logging.getLogger(__name__)


class FetchedResource:
    """An open HTTP response whose body has not necessarily been read.

    ``final_url`` is the URL after following redirects.
    """

    def __init__(self, response: httpx.Response, max_body_bytes: int):
        self._response = response
        self._max_body_bytes = max_body_bytes

    @property
    def content_type(self) -> str:
        """Declared Content-Type header, or an empty string."""
        return self._response.headers.get("content-type", "")

    @property
    def charset(self) -> str | None:
        """Charset from the Content-Type header, if any."""
        return self._response.charset_encoding

    @property
    def final_url(self) -> str:
        """URL of the response after redirects."""
        return str(self._response.url)

    async def read(self) -> bytes:
        """Read the response body, truncated to the configured size limit."""
        chunks: list[bytes] = []
        size = 0
        try:
            async for chunk in self._response.aiter_bytes():
                chunks.append(chunk)
                size += len(chunk)
                if size >= self._max_body_bytes:
                    logger.warning(
                        f"Body of {self.final_url} exceeds {self._max_body_bytes} bytes, truncating"
                    )
                    break
        except httpx.HTTPError as exc:
            raise FetchError(self.final_url, str(exc)) from exc
        return b"".join(chunks)[: self._max_body_bytes]


class Fetcher:
    """Fetches URLs with redirects followed and a bounded timeout.

    Failures are not retried.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._settings = settings
        self._transport = transport

    @asynccontextmanager
    async def open(self, url: str) -> AsyncIterator[FetchedResource]:
        """Open a streaming GET request for ``url``.

        Raises:
            FetchError: On transport failures and HTTP error statuses
        """
        async with httpx.AsyncClient(
            timeout=self._settings.fetch_timeout,
            follow_redirects=True,
            headers={"User-Agent": self._settings.user_agent},
            transport=self._transport,
        ) as client:
            try:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    logger.debug(f"Fetched {url} -> {response.url} ({response.status_code})")
                    yield FetchedResource(response, self._settings.max_body_bytes)
            except httpx.HTTPStatusError as exc:
                raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise FetchError(url, str(exc) or type(exc).__name__) from exc
