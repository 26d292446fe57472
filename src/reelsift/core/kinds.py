"""Entity kinds — Bind the generic lookup and search flows to actor or movie capabilities.

The cache-aside lookup and the fan-out search are written once. An
``EntityKind`` tells them which capability classes to check and which
provider methods to call for a given kind of entity.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from reelsift.models.actor import ActorInfo, ActorSearchResult
from reelsift.models.movie import MovieInfo, MovieSearchResult
from reelsift.models.record import Record
from reelsift.providers.base import ActorProvider, ActorSearcher, MovieProvider, MovieSearcher

InfoT = TypeVar("InfoT", bound=Record)
ResultT = TypeVar("ResultT", bound=Record)


@dataclass(frozen=True)
class EntityKind(Generic[InfoT, ResultT]):
    """Capability bindings for one entity kind."""

    name: str
    provider_type: type
    searcher_type: type
    info_model: type[InfoT]
    normalize_id: Callable[[Any, str], str]
    parse_id_from_url: Callable[[Any, str], str]
    fetch_by_id: Callable[[Any, str], Awaitable[InfoT]]
    fetch_by_url: Callable[[Any, str], Awaitable[InfoT]]
    search: Callable[[Any, str], Awaitable[list[ResultT]]]


ACTOR: EntityKind[ActorInfo, ActorSearchResult] = EntityKind(
    name="actor",
    provider_type=ActorProvider,
    searcher_type=ActorSearcher,
    info_model=ActorInfo,
    normalize_id=lambda p, id: p.normalize_actor_id(id),
    parse_id_from_url=lambda p, url: p.parse_actor_id_from_url(url),
    fetch_by_id=lambda p, id: p.get_actor_info_by_id(id),
    fetch_by_url=lambda p, url: p.get_actor_info_by_url(url),
    search=lambda p, keyword: p.search_actor(keyword),
)

MOVIE: EntityKind[MovieInfo, MovieSearchResult] = EntityKind(
    name="movie",
    provider_type=MovieProvider,
    searcher_type=MovieSearcher,
    info_model=MovieInfo,
    normalize_id=lambda p, id: p.normalize_movie_id(id),
    parse_id_from_url=lambda p, url: p.parse_movie_id_from_url(url),
    fetch_by_id=lambda p, id: p.get_movie_info_by_id(id),
    fetch_by_url=lambda p, url: p.get_movie_info_by_url(url),
    search=lambda p, keyword: p.search_movie(keyword),
)
