"""Fan-out search — Keyword search across every capable provider of one entity kind.

``search_all`` launches one task per registered provider and waits for all
of them. Each task runs the single-provider search in lazy mode, under its
own deadline. A failing or timed-out provider is logged and dropped; it never
affects the other providers or the caller. Valid results are appended to one
shared list as tasks complete, then stable-sorted by descending provider
priority, so results of equal priority keep their arrival order.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Generic

from reelsift.core.kinds import EntityKind, ResultT
from reelsift.providers.base import IdentityProvider, Provider
from reelsift.providers.exceptions import InfoNotFoundError, ProviderInvariantError
from reelsift.providers.registry import ProviderRegistry
from reelsift.store.base import RecordStore

logger = logging.getLogger(__name__)


class FanOutSearch(Generic[ResultT]):
    """Keyword search over the providers of one registry.

    Args:
        kind: Capability bindings for the entity kind.
        registry: Providers to search.
        store: Record store used for the lazy name-or-id pre-check.
        timeout: Per-provider deadline in seconds for ``search_all``.
            ``None`` waits indefinitely.
    """

    def __init__(
        self,
        kind: EntityKind[Any, ResultT],
        registry: ProviderRegistry[Any],
        store: RecordStore,
        timeout: float | None = None,
    ) -> None:
        self._kind = kind
        self._registry = registry
        self._store = store
        self._timeout = timeout

    async def search(self, provider: Provider, keyword: str, lazy: bool) -> list[ResultT]:
        """Search a single provider.

        In lazy mode, a valid stored record whose ID or name matches *keyword*
        is returned as the only result without a network call. Identity
        providers always search live.

        Raises:
            InfoNotFoundError: If the provider cannot search this entity kind.
        """
        if not isinstance(provider, self._kind.searcher_type):
            raise InfoNotFoundError(f"{provider.name} does not support {self._kind.name} search")

        if lazy and not isinstance(provider, IdentityProvider):
            cached = await self._store.find_by_name_or_id(self._kind.info_model, provider.name, keyword)
            if cached is not None and cached.is_valid():
                logger.debug("Cache hit for %s search %s:%s", self._kind.name, provider.name, keyword)
                return [cached.to_search_result()]

        return await self._kind.search(provider, keyword)

    async def search_all(self, keyword: str) -> list[ResultT]:
        """Search every provider concurrently and merge the valid results.

        Returns:
            Valid results ordered by descending provider priority. May be empty.

        Raises:
            ProviderInvariantError: If a result names an unregistered provider
                or one that cannot search.
        """
        start = time.monotonic()
        results: list[ResultT] = []
        lock = asyncio.Lock()

        async def _search_one(provider: Provider) -> int:
            async with asyncio.timeout(self._timeout):
                found = await self.search(provider, keyword, lazy=True)
            valid = [r for r in found if r.is_valid()]
            async with lock:
                results.extend(valid)
            return len(valid)

        providers = list(self._registry)
        outcomes = await asyncio.gather(
            *(_search_one(p) for p in providers),
            return_exceptions=True,
        )

        for provider, outcome in zip(providers, outcomes, strict=True):
            if isinstance(outcome, TimeoutError):
                logger.warning(
                    "%s search timed out on provider '%s' after %ss",
                    self._kind.name,
                    provider.name,
                    self._timeout,
                )
            elif isinstance(outcome, InfoNotFoundError):
                logger.debug("Provider '%s' skipped: %s", provider.name, outcome)
            elif isinstance(outcome, BaseException):
                logger.warning("%s search failed on provider '%s': %s", self._kind.name, provider.name, outcome)

        results.sort(key=self._priority, reverse=True)

        logger.info(
            "%s search for %r: %d results from %d providers in %d ms",
            self._kind.name,
            keyword,
            len(results),
            len(providers),
            int((time.monotonic() - start) * 1000),
        )
        return results

    def _priority(self, result: ResultT) -> int:
        provider = self._registry.must_get(result.provider)
        if not isinstance(provider, self._kind.searcher_type):
            raise ProviderInvariantError(
                f"{self._kind.name} result {result.id!r} names provider '{provider.name}', "
                f"which cannot search"
            )
        return provider.priority
