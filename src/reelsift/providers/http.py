"""HTTP provider base — Shared ``httpx`` plumbing for scraping providers.

Concrete providers subclass ``HTTPProvider`` together with the capability
classes they implement. The base class owns one ``httpx.AsyncClient`` per
provider, honours the configured request timeout, and implements ``Fetcher``
so that cookies and headers set by the provider apply to every resource it
serves.

Usage::

    class ExampleProvider(HTTPProvider, MovieProvider):
        def __init__(self) -> None:
            super().__init__(
                name="EXAMPLE",
                base_url="https://www.example.com/",
                cookies={"adc": "1"},
            )
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from reelsift.providers.base import Fetcher, Provider, RequestTimeoutSetter

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ReelSift/0.1)"


class HTTPProvider(Provider, RequestTimeoutSetter, Fetcher):
    """Base class for providers that talk to a website over HTTP.

    Args:
        name: Provider name.
        base_url: Canonical site URL, used for URL routing.
        timeout: Initial request timeout in seconds.
        headers: Extra default request headers.
        cookies: Cookies sent with every request.
        **kwargs: Extra keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        self._name = name
        self._url = httpx.URL(base_url)
        self._timeout = timeout
        self._headers = {"User-Agent": DEFAULT_USER_AGENT, **(headers or {})}
        self._cookies = cookies or {}
        self._client_kwargs = kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def url(self) -> httpx.URL:
        return self._url

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_request_timeout(self, timeout: float) -> None:
        self._timeout = timeout
        if self._client is not None:
            self._client.timeout = httpx.Timeout(timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """The provider's HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._url,
                timeout=httpx.Timeout(self._timeout),
                headers=self._headers,
                cookies=self._cookies,
                follow_redirects=True,
                **self._client_kwargs,
            )
        return self._client

    async def fetch(self, url: str) -> httpx.Response:
        resp = await self.client.get(url)
        resp.raise_for_status()
        return resp

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed HTTP client for provider %s", self._name)
