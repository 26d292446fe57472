"""Record store — Persistence for fetched actor and movie records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reelsift.providers.exceptions import ConfigurationError
from reelsift.store.base import RecordStore
from reelsift.store.memory import MemoryRecordStore

if TYPE_CHECKING:
    from reelsift.config.settings import StoreSettings

__all__ = ["MemoryRecordStore", "RecordStore", "create_store"]


def create_store(settings: StoreSettings) -> RecordStore:
    """Build the record store backend selected in *settings*.

    Raises:
        ConfigurationError: If the backend name is unknown.
    """
    if settings.backend == "memory":
        return MemoryRecordStore()
    if settings.backend == "redis":
        from reelsift.store.redis_store import RedisRecordStore

        return RedisRecordStore(url=settings.redis_url, key_prefix=settings.key_prefix)
    raise ConfigurationError(f"Unknown record store backend: {settings.backend}")
