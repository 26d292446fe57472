"""API v1 Router — Actor, movie, provider, and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from reelsift.api.v1.endpoints.actors import router as actors_router
from reelsift.api.v1.endpoints.health import router as health_router
from reelsift.api.v1.endpoints.movies import router as movies_router
from reelsift.api.v1.endpoints.providers import router as providers_router

router = APIRouter(tags=["v1"])
router.include_router(actors_router)
router.include_router(movies_router)
router.include_router(providers_router)
router.include_router(health_router)
