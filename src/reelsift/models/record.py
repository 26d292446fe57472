"""Record base model — Shared validity predicate for entity records and search results.

Every record class declares the fields that must be non-empty for the record
to count as complete. The same predicate gates cache hits, write-backs and
fan-out aggregation, so it lives here and nowhere else.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base class for provider-supplied records.

    Subclasses set:
      - ``kind``: entity kind used to namespace storage keys (``"actor"``, ``"movie"``).
      - ``required_fields``: fields that must be non-empty / non-zero.
      - ``lookup_fields``: fields matched by the store's name-or-id lookup.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: ClassVar[str] = ""
    required_fields: ClassVar[tuple[str, ...]] = ()
    lookup_fields: ClassVar[tuple[str, ...]] = ("id",)

    id: str = ""
    provider: str = ""
    homepage: str = ""

    def is_valid(self) -> bool:
        """Return True if every required field carries a value."""
        return all(_has_value(getattr(self, name)) for name in self.required_fields)

    def missing_fields(self) -> list[str]:
        """List the required fields that are empty."""
        return [name for name in self.required_fields if not _has_value(getattr(self, name))]


def _has_value(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() != ""
    return bool(value)
