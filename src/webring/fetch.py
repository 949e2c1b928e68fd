"""
Fetching webring and status documents over HTTP.

Every fetch is a coroutine. Cancelling the awaiting task aborts the request
at whichever point it is suspended (connecting, waiting for headers or
reading the body), closes the response and lets asyncio.CancelledError
propagate unchanged. No timeout is imposed unless FetchConfig asks for one.
"""

import asyncio
from typing import Optional, Tuple, Type

import httpx

from webring.codec import DOCUMENT_KINDS, Document, decode_document
from webring.config import FetchConfig
from webring.exceptions import FetchError, FetchTimeoutError, RequestConstructionError
from webring.logging_config import get_logger
from webring.models import Data, StatusData


def guess_status_url(webring_url: str) -> str:
    """Return the URL of the status document for the given webring URL.

    The first ".json" is replaced by ".status.json". This is a plain string
    replacement, not URL-aware, and a URL without ".json" is returned as is.

    Examples:
      "https://host/path/webring.json"   =>   "https://host/path/webring.status.json"
      "https://host/a.json/b.json"       =>   "https://host/a.status.json/b.json"
    """
    return webring_url.replace(".json", ".status.json", 1)


class WebringClient:
    """
    Client for webring and status documents.

    Either wraps a caller-owned httpx.AsyncClient, or opens one per fetch.
    Used as an async context manager it keeps a single client open for the
    duration of the block.
    """
    def __init__(self, config: Optional[FetchConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or FetchConfig()
        self._client = client
        self._owns_client = False
        self.logger = get_logger(__name__)

    async def __aenter__(self) -> "WebringClient":
        if self._client is None:
            self._client = self._new_client()
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
        )

    async def fetch_data(self, webring_url: str) -> Data:
        """Fetch the webring document at webring_url."""
        return await self._fetch_document(webring_url, Data)

    async def fetch_status(self, status_url: str) -> StatusData:
        """Fetch the status document at status_url."""
        return await self._fetch_document(status_url, StatusData)

    async def fetch_status_for_webring(self, webring_url: str) -> StatusData:
        """Fetch the status document whose URL is guessed from webring_url."""
        return await self.fetch_status(guess_status_url(webring_url))

    async def fetch_webring(self, webring_url: str) -> Tuple[Data, StatusData]:
        """
        Fetch the webring document and its status document concurrently.

        If either fetch fails the other one is cancelled and the error is
        raised.
        """
        tasks = [
            asyncio.ensure_future(self.fetch_data(webring_url)),
            asyncio.ensure_future(self.fetch_status_for_webring(webring_url)),
        ]
        try:
            data, status = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return data, status

    async def _fetch_document(self, url: str, model: Type[Document]) -> Document:
        if self._client is not None:
            return await self._fetch_with(self._client, url, model)
        async with self._new_client() as client:
            return await self._fetch_with(client, url, model)

    async def _fetch_with(self, client: httpx.AsyncClient, url: str, model: Type[Document]) -> Document:
        kind = DOCUMENT_KINDS[model]
        try:
            request = client.build_request("GET", url, headers=self.config.headers)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"failed to build request for {kind} document {url!r}: {e}", url=url) from e

        self.logger.debug(f"Fetching {kind} document from {url}")
        try:
            response = await client.send(request, stream=True, follow_redirects=self.config.follow_redirects)
        except httpx.UnsupportedProtocol as e:
            raise RequestConstructionError(f"failed to build request for {kind} document {url!r}: {e}", url=url) from e
        except httpx.TimeoutException as e:
            self.logger.error(f"Timed out fetching {kind} document from {url}: {e}")
            raise FetchTimeoutError(f"failed to fetch {kind} document: timed out: {e}", url=url) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Failed to fetch {kind} document from {url}: {e}")
            raise FetchError(f"failed to fetch {kind} document: {e}", url=url) from e

        try:
            if response.status_code != httpx.codes.OK:
                status_line = f"{response.status_code} {response.reason_phrase}"
                self.logger.error(f"Failed to fetch {kind} document from {url}: {status_line}")
                raise FetchError(
                    f"failed to fetch {kind} document: {status_line}",
                    url=url,
                    status_code=response.status_code,
                )
            try:
                body = await response.aread()
            except httpx.TimeoutException as e:
                self.logger.error(f"Timed out reading {kind} document from {url}: {e}")
                raise FetchTimeoutError(f"failed to fetch {kind} document: timed out: {e}", url=url) from e
            except httpx.HTTPError as e:
                self.logger.error(f"Failed to read {kind} document from {url}: {e}")
                raise FetchError(f"failed to fetch {kind} document: {e}", url=url) from e
        finally:
            await response.aclose()

        document = decode_document(body, model)
        self.logger.debug(f"Decoded {kind} document from {url}")
        return document


async def fetch_data(webring_url: str, config: Optional[FetchConfig] = None) -> Data:
    """Fetch the webring document at webring_url."""
    return await WebringClient(config).fetch_data(webring_url)


async def fetch_status(status_url: str, config: Optional[FetchConfig] = None) -> StatusData:
    """Fetch the status document at status_url."""
    return await WebringClient(config).fetch_status(status_url)


async def fetch_status_for_webring(webring_url: str, config: Optional[FetchConfig] = None) -> StatusData:
    """Fetch the status document for webring_url, see guess_status_url."""
    return await WebringClient(config).fetch_status_for_webring(webring_url)


async def fetch_webring(webring_url: str, config: Optional[FetchConfig] = None) -> Tuple[Data, StatusData]:
    """Fetch the webring document and its status document concurrently."""
    async with WebringClient(config) as client:
        return await client.fetch_webring(webring_url)
