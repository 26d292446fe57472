"""Provider capabilities — Abstract interfaces implemented by metadata providers.

A provider is any object that derives from ``Provider`` and one or more of the
capability classes below. The engine dispatches on capability with
``isinstance`` checks, so a provider opts into a behaviour by inheriting the
matching class:

  - ``ActorProvider`` / ``MovieProvider``: fetch a single record by ID or URL
  - ``ActorSearcher`` / ``MovieSearcher``: keyword search, with a priority
  - ``RequestTimeoutSetter``: accepts the configured upstream timeout
  - ``Fetcher``: fetches its own resources (cookies, headers, etc.)
  - ``IdentityProvider``: serves externally versioned reference data; always
    fetched live and never written to the record store

Providers are constructed once at startup and must be safe for concurrent use
afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from reelsift.models.actor import ActorInfo, ActorSearchResult
from reelsift.models.movie import MovieInfo, MovieSearchResult


class Provider(ABC):
    """Base class for all metadata providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable provider name (matched case-insensitively)."""

    @property
    @abstractmethod
    def url(self) -> httpx.URL:
        """Canonical base URL; its host and path route URL lookups to this provider."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} url={str(self.url)!r}>"


class ActorProvider(Provider):
    """Provider that fetches actor profiles."""

    @abstractmethod
    def normalize_actor_id(self, id: str) -> str:
        """Normalize a raw actor ID. Returns an empty string if the ID is invalid."""

    @abstractmethod
    def parse_actor_id_from_url(self, url: str) -> str:
        """Extract the actor ID from a provider URL."""

    @abstractmethod
    async def get_actor_info_by_id(self, id: str) -> ActorInfo:
        """Fetch an actor profile by normalized ID."""

    @abstractmethod
    async def get_actor_info_by_url(self, url: str) -> ActorInfo:
        """Fetch an actor profile from its page URL."""


class ActorSearcher(ABC):
    """Capability: keyword search over actors."""

    @property
    @abstractmethod
    def priority(self) -> int:
        """Ordering weight for merged search results (higher first)."""

    @abstractmethod
    async def search_actor(self, keyword: str) -> list[ActorSearchResult]:
        """Search actors by keyword."""


class MovieProvider(Provider):
    """Provider that fetches movie metadata."""

    @abstractmethod
    def normalize_movie_id(self, id: str) -> str:
        """Normalize a raw movie ID. Returns an empty string if the ID is invalid."""

    @abstractmethod
    def parse_movie_id_from_url(self, url: str) -> str:
        """Extract the movie ID from a provider URL."""

    @abstractmethod
    async def get_movie_info_by_id(self, id: str) -> MovieInfo:
        """Fetch movie metadata by normalized ID."""

    @abstractmethod
    async def get_movie_info_by_url(self, url: str) -> MovieInfo:
        """Fetch movie metadata from its page URL."""


class MovieSearcher(ABC):
    """Capability: keyword search over movies."""

    @property
    @abstractmethod
    def priority(self) -> int:
        """Ordering weight for merged search results (higher first)."""

    @abstractmethod
    async def search_movie(self, keyword: str) -> list[MovieSearchResult]:
        """Search movies by keyword."""


class RequestTimeoutSetter(ABC):
    """Capability: accepts an upstream request timeout."""

    @abstractmethod
    def set_request_timeout(self, timeout: float) -> None:
        """Apply *timeout* (seconds) to every upstream request."""


class Fetcher(ABC):
    """Capability: fetches resources with provider-specific session state."""

    @abstractmethod
    async def fetch(self, url: str) -> httpx.Response:
        """GET *url* with the provider's client."""


class IdentityProvider(ABC):
    """Marker: records are always fetched live and never persisted."""
