"""Record store interface — Key-indexed persistence for fetched records.

Records are keyed by ``(kind, provider, id)``. ``upsert`` inserts or fully
overwrites the record under that key (last writer wins). Backends must
tolerate concurrent upserts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from reelsift.models.record import Record

R = TypeVar("R", bound=Record)


class RecordStore(ABC):
    """Abstract base class for record store backends."""

    @property
    @abstractmethod
    def backend(self) -> str:
        """Backend name (e.g., 'memory', 'redis')."""

    async def initialize(self) -> None:
        """Prepare the backend (connections, schema). Called once at startup."""

    async def shutdown(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def find_exact(self, model: type[R], provider: str, id: str) -> R | None:
        """Return the record stored under ``(provider, id)``, or None."""

    @abstractmethod
    async def find_by_name_or_id(self, model: type[R], provider: str, keyword: str) -> R | None:
        """Return a record of *provider* whose ``lookup_fields`` equal *keyword*, or None."""

    @abstractmethod
    async def upsert(self, record: Record) -> None:
        """Insert *record*, overwriting every field of any existing record with the same key."""
