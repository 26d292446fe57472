"""In-memory record store.

Holds serialized records in a process-local dict. Intended for tests,
development, and single-process deployments where persistence across
restarts is not needed.
"""

from __future__ import annotations

import logging
from typing import Any

from reelsift.models.record import Record
from reelsift.store.base import R, RecordStore

logger = logging.getLogger(__name__)


class MemoryRecordStore(RecordStore):
    """Record store backed by a dict keyed on ``(kind, provider, id)``.

    Records are stored as plain dicts and re-validated on read, so callers
    never share mutable state with the store.
    """

    def __init__(self) -> None:
        self._records: dict[tuple[str, str, str], dict[str, Any]] = {}

    @property
    def backend(self) -> str:
        return "memory"

    async def shutdown(self) -> None:
        self._records.clear()

    async def find_exact(self, model: type[R], provider: str, id: str) -> R | None:
        data = self._records.get((model.kind, provider, id))
        return model.model_validate(data) if data is not None else None

    async def find_by_name_or_id(self, model: type[R], provider: str, keyword: str) -> R | None:
        exact = await self.find_exact(model, provider, keyword)
        if exact is not None:
            return exact
        for (kind, record_provider, _), data in self._records.items():
            if kind != model.kind or record_provider != provider:
                continue
            if any(data.get(field) == keyword for field in model.lookup_fields):
                return model.model_validate(data)
        return None

    async def upsert(self, record: Record) -> None:
        key = (record.kind, record.provider, record.id)
        self._records[key] = record.model_dump(mode="json")
        logger.debug("Upserted %s record %s:%s", record.kind, record.provider, record.id)

    def __len__(self) -> int:
        return len(self._records)
