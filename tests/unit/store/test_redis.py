"""Tests for the Redis record store, using an in-process stand-in for the Redis client."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from reelsift.models.actor import ActorInfo
from reelsift.models.movie import MovieInfo
from reelsift.providers.exceptions import StoreError
from reelsift.store.redis_store import RedisRecordStore
from tests.fakes import make_actor, make_movie


class _FakePipeline:
    def __init__(self, data: dict[str, str]) -> None:
        self._data = data
        self._pending: list[tuple[str, str]] = []

    async def __aenter__(self) -> _FakePipeline:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self._pending.clear()

    def set(self, key: str, value: str) -> None:
        self._pending.append((key, value))

    async def execute(self) -> list[bool]:
        for key, value in self._pending:
            self._data[key] = value
        return [True] * len(self._pending)


class _FakeRedis:
    """Dict-backed subset of ``redis.asyncio.Redis`` used by the store."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.closed = False

    async def ping(self) -> bool:
        return True

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    def pipeline(self, transaction: bool = True) -> _FakePipeline:
        return _FakePipeline(self.data)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
async def redis_store() -> RedisRecordStore:
    store = RedisRecordStore(key_prefix="test", client=_FakeRedis())
    await store.initialize()
    return store


class TestRedisRecordStore:
    async def test_upsert_writes_record_and_index(self, redis_store: RedisRecordStore) -> None:
        await redis_store.upsert(make_actor("a1", "alpha", name="Aoi"))
        data = redis_store._client.data
        assert "test:actor:alpha:a1" in data
        assert data["test:actor:alpha:name=Aoi"] == "a1"
        assert not any(key.startswith("test:actor:alpha:id=") for key in data)

    async def test_find_exact(self, redis_store: RedisRecordStore) -> None:
        actor = make_actor("a1", "alpha", name="Aoi", aliases=["A", "B"])
        await redis_store.upsert(actor)
        assert await redis_store.find_exact(ActorInfo, "alpha", "a1") == actor
        assert await redis_store.find_exact(ActorInfo, "alpha", "zz") is None

    async def test_find_by_name_or_id(self, redis_store: RedisRecordStore) -> None:
        await redis_store.upsert(make_actor("a1", "alpha", name="Aoi"))
        by_name = await redis_store.find_by_name_or_id(ActorInfo, "alpha", "Aoi")
        by_id = await redis_store.find_by_name_or_id(ActorInfo, "alpha", "a1")
        assert by_name is not None and by_name.id == "a1"
        assert by_id is not None and by_id.name == "Aoi"

    async def test_movie_number_index(self, redis_store: RedisRecordStore) -> None:
        await redis_store.upsert(make_movie("abc-001", "omega"))
        found = await redis_store.find_by_name_or_id(MovieInfo, "omega", "ABC-001")
        assert found is not None
        assert found.id == "abc-001"

    async def test_stale_index_entry_is_ignored(self, redis_store: RedisRecordStore) -> None:
        await redis_store.upsert(make_actor("a1", "alpha", name="Old"))
        await redis_store.upsert(make_actor("a1", "alpha", name="New"))
        assert await redis_store.find_by_name_or_id(ActorInfo, "alpha", "Old") is None
        found = await redis_store.find_by_name_or_id(ActorInfo, "alpha", "New")
        assert found is not None

    async def test_shutdown_closes_client(self, redis_store: RedisRecordStore) -> None:
        client = redis_store._client
        await redis_store.shutdown()
        assert client.closed


class TestRedisErrors:
    async def test_uninitialized_store_raises(self) -> None:
        store = RedisRecordStore()
        with pytest.raises(StoreError, match="not initialized"):
            await store.find_exact(ActorInfo, "alpha", "a1")

    async def test_connection_failure_on_initialize(self) -> None:
        client = MagicMock()
        client.ping = AsyncMock(side_effect=RedisConnectionError("refused"))
        store = RedisRecordStore(url="redis://nowhere:6379/0", client=client)
        with pytest.raises(StoreError, match="Failed to connect"):
            await store.initialize()

    async def test_read_failure_wrapped(self) -> None:
        client = MagicMock()
        client.ping = AsyncMock(return_value=True)
        client.get = AsyncMock(side_effect=RedisConnectionError("reset"))
        store = RedisRecordStore(client=client)
        await store.initialize()
        with pytest.raises(StoreError, match="read failed"):
            await store.find_exact(ActorInfo, "alpha", "a1")
