"""Actor endpoints — Profile lookup by provider ID or URL, and keyword search."""

from __future__ import annotations

from fastapi import APIRouter, Query

from reelsift.api.deps import EngineDep, LazyFlag, ProviderFilter
from reelsift.models.actor import ActorInfo, ActorSearchResult

router = APIRouter(prefix="/actors", tags=["actors"])


@router.get(
    "/search",
    response_model=list[ActorSearchResult],
    summary="Search Actors",
    description=(
        "Search actors by keyword. Without `provider`, every actor provider is "
        "queried concurrently; providers that fail are skipped and results are "
        "ordered by provider priority."
    ),
)
async def search_actors(
    engine: EngineDep,
    q: str = Query(min_length=1, description="Actor name or provider ID"),
    provider: ProviderFilter = None,
    lazy: LazyFlag = True,
) -> list[ActorSearchResult]:
    if provider is None:
        return await engine.search_actor_all(q)
    return await engine.search_actor(q, provider, lazy=lazy)


@router.get(
    "",
    response_model=ActorInfo,
    summary="Get Actor by URL",
    description="Resolve the provider from an actor page URL and return the profile.",
)
async def get_actor_by_url(
    engine: EngineDep,
    url: str = Query(min_length=1, description="Actor page URL on a provider site"),
    lazy: LazyFlag = True,
) -> ActorInfo:
    return await engine.get_actor_info_by_url(url, lazy=lazy)


@router.get("/{provider}/{id}", response_model=ActorInfo, summary="Get Actor by Provider ID")
async def get_actor(provider: str, id: str, engine: EngineDep, lazy: LazyFlag = True) -> ActorInfo:
    return await engine.get_actor_info_by_provider_id(provider, id, lazy=lazy)
