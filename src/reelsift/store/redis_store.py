"""Redis record store.

Layout (``prefix`` defaults to ``reelsift``)::

    {prefix}:{kind}:{provider}:{id}                -> record JSON
    {prefix}:{kind}:{provider}:{field}={value}     -> id   (secondary lookup index)

Each upsert writes the record and its lookup index entries in one
transaction. Index entries can go stale when a record's name changes; reads
through the index re-check the field before returning.
"""

from __future__ import annotations

import logging
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from reelsift.models.record import Record
from reelsift.providers.exceptions import StoreError
from reelsift.store.base import R, RecordStore

logger = logging.getLogger(__name__)


class RedisRecordStore(RecordStore):
    """Record store backed by Redis string keys.

    Args:
        url: Redis connection URL.
        key_prefix: Namespace prepended to every key.
        client: Pre-built ``redis.asyncio.Redis`` client (skips ``from_url``).
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        key_prefix: str = "reelsift",
        client: Any = None,
    ) -> None:
        self._url = url
        self._prefix = key_prefix
        self._client: Any = client

    @property
    def backend(self) -> str:
        return "redis"

    async def initialize(self) -> None:
        """Connect to Redis and verify the connection."""
        if self._client is None:
            self._client = aioredis.from_url(self._url, decode_responses=True)
        try:
            await self._client.ping()
        except RedisError as e:
            raise StoreError(f"Failed to connect to Redis at {self._url}: {e}") from e
        logger.info("Connected to Redis record store at %s", self._url)

    async def shutdown(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ── Keys ─────────────────────────────────────────────────────────────

    def _record_key(self, kind: str, provider: str, id: str) -> str:
        return f"{self._prefix}:{kind}:{provider}:{id}"

    def _index_key(self, kind: str, provider: str, field: str, value: str) -> str:
        return f"{self._prefix}:{kind}:{provider}:{field}={value}"

    # ── Reads ────────────────────────────────────────────────────────────

    async def find_exact(self, model: type[R], provider: str, id: str) -> R | None:
        raw = await self._get(self._record_key(model.kind, provider, id))
        return model.model_validate_json(raw) if raw else None

    async def find_by_name_or_id(self, model: type[R], provider: str, keyword: str) -> R | None:
        exact = await self.find_exact(model, provider, keyword)
        if exact is not None:
            return exact
        for field in model.lookup_fields:
            if field == "id":
                continue
            id = await self._get(self._index_key(model.kind, provider, field, keyword))
            if not id:
                continue
            record = await self.find_exact(model, provider, id)
            if record is not None and getattr(record, field) == keyword:
                return record
        return None

    # ── Writes ───────────────────────────────────────────────────────────

    async def upsert(self, record: Record) -> None:
        client = self._require_client()
        try:
            async with client.pipeline(transaction=True) as pipe:
                pipe.set(
                    self._record_key(record.kind, record.provider, record.id),
                    record.model_dump_json(),
                )
                for field in record.lookup_fields:
                    value = getattr(record, field)
                    if field == "id" or not value:
                        continue
                    pipe.set(self._index_key(record.kind, record.provider, field, value), record.id)
                await pipe.execute()
        except RedisError as e:
            raise StoreError(f"Failed to upsert {record.kind} {record.provider}:{record.id}: {e}") from e
        logger.debug("Upserted %s record %s:%s", record.kind, record.provider, record.id)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _require_client(self) -> Any:
        if self._client is None:
            raise StoreError("Redis record store not initialized.")
        return self._client

    async def _get(self, key: str) -> str | None:
        client = self._require_client()
        try:
            return await client.get(key)
        except RedisError as e:
            raise StoreError(f"Redis read failed for key {key}: {e}") from e
