"""Movie models."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

from pydantic import Field

from reelsift.models.record import Record


class MovieSearchResult(Record):
    """Lightweight movie entry returned by keyword search."""

    kind: ClassVar[str] = "movie"
    required_fields: ClassVar[tuple[str, ...]] = ("id", "number", "title", "provider", "homepage")

    number: str = ""
    title: str = ""
    thumb_url: str = ""
    cover_url: str = ""
    score: float = 0.0
    actors: list[str] = Field(default_factory=list)
    release_date: date | None = None


class MovieInfo(Record):
    """Full movie metadata as fetched from a provider."""

    kind: ClassVar[str] = "movie"
    required_fields: ClassVar[tuple[str, ...]] = ("id", "number", "title", "cover_url", "provider", "homepage")
    lookup_fields: ClassVar[tuple[str, ...]] = ("id", "number")

    number: str = ""
    title: str = ""
    summary: str = ""
    director: str = ""
    actors: list[str] = Field(default_factory=list)
    thumb_url: str = ""
    big_thumb_url: str = ""
    cover_url: str = ""
    big_cover_url: str = ""
    preview_video_url: str = ""
    preview_video_hls_url: str = ""
    preview_images: list[str] = Field(default_factory=list)
    maker: str = ""
    label: str = ""
    series: str = ""
    genres: list[str] = Field(default_factory=list)
    score: float = 0.0
    runtime: int = Field(default=0, description="Runtime in minutes")
    release_date: date | None = None

    def to_search_result(self) -> MovieSearchResult:
        return MovieSearchResult(
            id=self.id,
            number=self.number,
            title=self.title,
            provider=self.provider,
            homepage=self.homepage,
            thumb_url=self.thumb_url,
            cover_url=self.cover_url,
            score=self.score,
            actors=list(self.actors),
            release_date=self.release_date,
        )
