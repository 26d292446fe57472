"""Movie endpoints — Metadata lookup by provider ID or URL, and keyword search."""

from __future__ import annotations

from fastapi import APIRouter, Query

from reelsift.api.deps import EngineDep, LazyFlag, ProviderFilter
from reelsift.models.movie import MovieInfo, MovieSearchResult

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get(
    "/search",
    response_model=list[MovieSearchResult],
    summary="Search Movies",
    description=(
        "Search movies by keyword, typically a release number such as `ABC-123`. "
        "Without `provider`, every movie provider is queried concurrently and "
        "results are ordered by provider priority."
    ),
)
async def search_movies(
    engine: EngineDep,
    q: str = Query(min_length=1, description="Release number, title keyword or provider ID"),
    provider: ProviderFilter = None,
    lazy: LazyFlag = True,
) -> list[MovieSearchResult]:
    if provider is None:
        return await engine.search_movie_all(q)
    return await engine.search_movie(q, provider, lazy=lazy)


@router.get(
    "",
    response_model=MovieInfo,
    summary="Get Movie by URL",
    description="Resolve the provider from a movie page URL and return its metadata.",
)
async def get_movie_by_url(
    engine: EngineDep,
    url: str = Query(min_length=1, description="Movie page URL on a provider site"),
    lazy: LazyFlag = True,
) -> MovieInfo:
    return await engine.get_movie_info_by_url(url, lazy=lazy)


@router.get("/{provider}/{id}", response_model=MovieInfo, summary="Get Movie by Provider ID")
async def get_movie(provider: str, id: str, engine: EngineDep, lazy: LazyFlag = True) -> MovieInfo:
    return await engine.get_movie_info_by_provider_id(provider, id, lazy=lazy)
