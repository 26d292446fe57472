"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from reelsift import __version__
from reelsift.api.deps import EngineDep

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="ReelSift server version")
    service: str = Field(description="Service name ('reelsift')")
    store_backend: str = Field(description="Record store backend name")
    actor_providers: int = Field(description="Number of registered actor providers")
    movie_providers: int = Field(description="Number of registered movie providers")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
)
async def health_check(engine: EngineDep) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="reelsift",
        store_backend=engine.store.backend,
        actor_providers=len(engine.actor_providers),
        movie_providers=len(engine.movie_providers),
    )
