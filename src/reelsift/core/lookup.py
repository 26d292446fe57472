"""Cache-aside lookup — Single-record fetch with lazy store read and write-back.

Both entry points (by ID, by URL) resolve an identifier first and then run
the same sequence:

  1. Identity providers skip the store entirely and fetch live.
  2. In lazy mode, a valid record stored under ``(provider, id)`` is returned
     without touching the network.
  3. Otherwise the provider fetches the record live.
  4. A record failing the validity predicate raises
     ``IncompleteMetadataError`` and is not stored; a valid record is upserted
     and returned.

Every error is terminal for the call. Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic

from reelsift.core.kinds import EntityKind, InfoT
from reelsift.providers.base import IdentityProvider, Provider
from reelsift.providers.exceptions import IncompleteMetadataError, InvalidIDError, InvalidURLError
from reelsift.store.base import RecordStore

logger = logging.getLogger(__name__)


class CacheAsideLookup(Generic[InfoT]):
    """Fetches single records for one entity kind, caching them in a record store.

    Args:
        kind: Capability bindings for the entity kind.
        store: Record store used for lazy reads and write-back.
    """

    def __init__(self, kind: EntityKind[InfoT, Any], store: RecordStore) -> None:
        self._kind = kind
        self._store = store

    async def get_by_id(self, provider: Provider, id: str, lazy: bool) -> InfoT:
        """Fetch a record by raw provider ID.

        Raises:
            InvalidIDError: If the ID normalizes to an empty string.
            IncompleteMetadataError: If the fetched record is incomplete.
        """
        normalized = self._kind.normalize_id(provider, id)
        if not normalized:
            raise InvalidIDError(f"invalid {self._kind.name} id for {provider.name}: {id!r}")
        return await self._get(
            provider,
            normalized,
            lazy,
            lambda: self._kind.fetch_by_id(provider, normalized),
        )

    async def get_by_url(self, provider: Provider, url: str, lazy: bool) -> InfoT:
        """Fetch a record from a provider page URL.

        Errors raised by the provider's URL parser propagate unchanged.

        Raises:
            InvalidURLError: If no ID can be parsed from the URL.
            IncompleteMetadataError: If the fetched record is incomplete.
        """
        id = self._kind.parse_id_from_url(provider, url)
        if not id:
            raise InvalidURLError(f"invalid {self._kind.name} url for {provider.name}: {url}")
        return await self._get(
            provider,
            id,
            lazy,
            lambda: self._kind.fetch_by_url(provider, url),
        )

    async def _get(
        self,
        provider: Provider,
        id: str,
        lazy: bool,
        fetch: Callable[[], Awaitable[InfoT]],
    ) -> InfoT:
        if isinstance(provider, IdentityProvider):
            return self._validate(await fetch(), provider, id)

        if lazy:
            cached = await self._store.find_exact(self._kind.info_model, provider.name, id)
            if cached is not None and cached.is_valid():
                logger.debug("Cache hit for %s %s:%s", self._kind.name, provider.name, id)
                return cached

        info = self._validate(await fetch(), provider, id)
        if (info.provider, info.id) != (provider.name, id):
            # Stored under the record's own key, so lazy lookups by this id will miss
            logger.warning(
                "%s record from %s keyed %s:%s does not match lookup %s:%s",
                self._kind.name,
                provider.name,
                info.provider,
                info.id,
                provider.name,
                id,
            )
        await self._store.upsert(info)
        logger.debug("Stored %s %s:%s", self._kind.name, info.provider, info.id)
        return info

    def _validate(self, info: InfoT | None, provider: Provider, id: str) -> InfoT:
        if info is None or not info.is_valid():
            missing = info.missing_fields() if info is not None else ["*"]
            raise IncompleteMetadataError(
                f"incomplete {self._kind.name} metadata from {provider.name} for {id}: "
                f"missing {', '.join(missing)}"
            )
        return info
