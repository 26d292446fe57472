"""Provider endpoints — List registered providers and their capabilities."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from reelsift.api.deps import EngineDep
from reelsift.providers.base import (
    ActorSearcher,
    IdentityProvider,
    MovieSearcher,
    Provider,
)

router = APIRouter()


class ProviderInfo(BaseModel):
    """Public description of a registered provider."""

    name: str = Field(description="Provider name")
    url: str = Field(description="Canonical base URL")
    searchable: bool = Field(description="Whether the provider supports keyword search")
    priority: int | None = Field(default=None, description="Search priority (searchers only)")
    identity: bool = Field(default=False, description="Records are always fetched live and never stored")


class ProvidersResponse(BaseModel):
    actor_providers: list[ProviderInfo]
    movie_providers: list[ProviderInfo]


def _describe(provider: Provider, searcher_type: type) -> ProviderInfo:
    searchable = isinstance(provider, searcher_type)
    return ProviderInfo(
        name=provider.name,
        url=str(provider.url),
        searchable=searchable,
        priority=provider.priority if searchable else None,  # type: ignore[attr-defined]
        identity=isinstance(provider, IdentityProvider),
    )


@router.get(
    "/providers",
    response_model=ProvidersResponse,
    summary="List Providers",
    description="List actor and movie providers in registration order.",
)
async def list_providers(engine: EngineDep) -> ProvidersResponse:
    return ProvidersResponse(
        actor_providers=[_describe(p, ActorSearcher) for p in engine.actor_providers],
        movie_providers=[_describe(p, MovieSearcher) for p in engine.movie_providers],
    )
