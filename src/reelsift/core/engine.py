"""ReelSift Engine — Facade over provider registries, cache-aside lookup, and fan-out search.

The engine owns one provider registry per entity kind and the record store,
and exposes the actor and movie operations used by the API:

  - provider resolution by name or URL
  - single-record lookup by provider ID or by URL (cache-aside)
  - keyword search on one provider, or across all providers (fan-out)
  - raw resource fetch through a provider's own HTTP session
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from reelsift.core.kinds import ACTOR, MOVIE
from reelsift.core.lookup import CacheAsideLookup
from reelsift.core.search import FanOutSearch
from reelsift.models.actor import ActorInfo, ActorSearchResult
from reelsift.models.movie import MovieInfo, MovieSearchResult
from reelsift.providers.base import ActorProvider, Fetcher, MovieProvider, Provider
from reelsift.providers.http import HTTPProvider
from reelsift.providers.registry import ProviderRegistry, import_factory
from reelsift.store import create_store

if TYPE_CHECKING:
    from reelsift.config.settings import Settings
    from reelsift.store.base import RecordStore

logger = logging.getLogger(__name__)


class ReelSiftEngine:
    """Core orchestrator for actor and movie metadata.

    Registries and store default to what ``settings`` describes; pass them
    explicitly to wire in custom providers or a shared store.

    Attributes:
        settings: Application configuration.
        actor_providers: Registry of actor providers.
        movie_providers: Registry of movie providers.
        store: Record store for fetched records.
    """

    def __init__(
        self,
        settings: Settings,
        actor_providers: ProviderRegistry[ActorProvider] | None = None,
        movie_providers: ProviderRegistry[MovieProvider] | None = None,
        store: RecordStore | None = None,
    ) -> None:
        self.settings = settings
        timeout = settings.providers.request_timeout

        if actor_providers is None:
            actor_providers = ProviderRegistry(
                "actor",
                ActorProvider,
                [import_factory(path) for path in settings.providers.actor_providers],
                timeout=timeout,
            )
        if movie_providers is None:
            movie_providers = ProviderRegistry(
                "movie",
                MovieProvider,
                [import_factory(path) for path in settings.providers.movie_providers],
                timeout=timeout,
            )
        self.actor_providers = actor_providers
        self.movie_providers = movie_providers
        self.store = store if store is not None else create_store(settings.store)

        search_timeout = settings.providers.search_timeout
        self._actor_lookup = CacheAsideLookup(ACTOR, self.store)
        self._movie_lookup = CacheAsideLookup(MOVIE, self.store)
        self._actor_search = FanOutSearch(ACTOR, self.actor_providers, self.store, timeout=search_timeout)
        self._movie_search = FanOutSearch(MOVIE, self.movie_providers, self.store, timeout=search_timeout)
        self._http_client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Prepare the record store."""
        await self.store.initialize()
        logger.info(
            "ReelSift engine initialized (%d actor providers, %d movie providers, store=%s)",
            len(self.actor_providers),
            len(self.movie_providers),
            self.store.backend,
        )

    async def shutdown(self) -> None:
        """Close provider HTTP clients and the record store."""
        closed: set[int] = set()
        for provider in [*self.actor_providers, *self.movie_providers]:
            if isinstance(provider, HTTPProvider) and id(provider) not in closed:
                closed.add(id(provider))
                await provider.aclose()
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        await self.store.shutdown()
        logger.info("ReelSift engine shut down")

    # ──────────────────────────────────────────────────────────────────────
    # Actors
    # ──────────────────────────────────────────────────────────────────────

    def is_actor_provider(self, name: str) -> bool:
        return self.actor_providers.contains(name)

    def get_actor_provider_by_name(self, name: str) -> ActorProvider:
        return self.actor_providers.get(name)

    def get_actor_provider_by_url(self, url: str) -> ActorProvider:
        return self.actor_providers.get_by_url(url)

    def must_get_actor_provider_by_name(self, name: str) -> ActorProvider:
        return self.actor_providers.must_get(name)

    async def get_actor_info_by_provider_id(self, name: str, id: str, lazy: bool = True) -> ActorInfo:
        """Fetch an actor from the named provider by ID."""
        provider = self.actor_providers.get(name)
        return await self._actor_lookup.get_by_id(provider, id, lazy)

    async def get_actor_info_by_url(self, url: str, lazy: bool = True) -> ActorInfo:
        """Fetch an actor from the provider serving *url*."""
        provider = self.actor_providers.get_by_url(url)
        return await self._actor_lookup.get_by_url(provider, url, lazy)

    async def search_actor(self, keyword: str, name: str, lazy: bool = True) -> list[ActorSearchResult]:
        """Search actors on the named provider. Errors propagate."""
        provider = self.actor_providers.get(name)
        return await self._actor_search.search(provider, keyword, lazy)

    async def search_actor_all(self, keyword: str) -> list[ActorSearchResult]:
        """Search actors on every provider; failing providers are skipped."""
        return await self._actor_search.search_all(keyword)

    # ──────────────────────────────────────────────────────────────────────
    # Movies
    # ──────────────────────────────────────────────────────────────────────

    def is_movie_provider(self, name: str) -> bool:
        return self.movie_providers.contains(name)

    def get_movie_provider_by_name(self, name: str) -> MovieProvider:
        return self.movie_providers.get(name)

    def get_movie_provider_by_url(self, url: str) -> MovieProvider:
        return self.movie_providers.get_by_url(url)

    def must_get_movie_provider_by_name(self, name: str) -> MovieProvider:
        return self.movie_providers.must_get(name)

    async def get_movie_info_by_provider_id(self, name: str, id: str, lazy: bool = True) -> MovieInfo:
        """Fetch a movie from the named provider by ID."""
        provider = self.movie_providers.get(name)
        return await self._movie_lookup.get_by_id(provider, id, lazy)

    async def get_movie_info_by_url(self, url: str, lazy: bool = True) -> MovieInfo:
        """Fetch a movie from the provider serving *url*."""
        provider = self.movie_providers.get_by_url(url)
        return await self._movie_lookup.get_by_url(provider, url, lazy)

    async def search_movie(self, keyword: str, name: str, lazy: bool = True) -> list[MovieSearchResult]:
        """Search movies on the named provider. Errors propagate."""
        provider = self.movie_providers.get(name)
        return await self._movie_search.search(provider, keyword, lazy)

    async def search_movie_all(self, keyword: str) -> list[MovieSearchResult]:
        """Search movies on every provider; failing providers are skipped."""
        return await self._movie_search.search_all(keyword)

    # ──────────────────────────────────────────────────────────────────────
    # Resources
    # ──────────────────────────────────────────────────────────────────────

    async def fetch(self, url: str, provider: Provider | None = None) -> httpx.Response:
        """Fetch a resource (image, preview, etc.) belonging to *provider*.

        Providers implementing ``Fetcher`` fetch their own resources so that
        their cookies and headers apply. Everything else goes through a
        shared client.
        """
        if isinstance(provider, Fetcher):
            return await provider.fetch(url)
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.providers.request_timeout),
                follow_redirects=True,
            )
        resp = await self._http_client.get(url)
        resp.raise_for_status()
        return resp
