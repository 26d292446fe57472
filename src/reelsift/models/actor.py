"""Actor models."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

from pydantic import Field

from reelsift.models.record import Record


class ActorSearchResult(Record):
    """Lightweight actor entry returned by keyword search."""

    kind: ClassVar[str] = "actor"
    required_fields: ClassVar[tuple[str, ...]] = ("id", "name", "provider", "homepage")

    name: str = ""
    aliases: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)


class ActorInfo(Record):
    """Full actor profile as fetched from a provider."""

    kind: ClassVar[str] = "actor"
    required_fields: ClassVar[tuple[str, ...]] = ("id", "name", "provider", "homepage")
    lookup_fields: ClassVar[tuple[str, ...]] = ("id", "name")

    name: str = ""
    summary: str = ""
    hobby: str = ""
    skills: str = ""
    blood_type: str = ""
    cup_size: str = ""
    measurements: str = ""
    nationality: str = ""
    height: int = 0
    aliases: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    birthday: date | None = None
    debut_date: date | None = None

    def to_search_result(self) -> ActorSearchResult:
        return ActorSearchResult(
            id=self.id,
            name=self.name,
            provider=self.provider,
            homepage=self.homepage,
            aliases=list(self.aliases),
            images=list(self.images),
        )
