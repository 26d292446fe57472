"""API dependencies — Engine injection and shared query parameters for v1 endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query

from reelsift.core.engine import ReelSiftEngine

# Set by the application lifespan; tests may install their own engine
_engine: ReelSiftEngine | None = None


def set_engine(engine: ReelSiftEngine | None) -> None:
    """Install (or clear, with None) the engine served to request handlers."""
    global _engine
    _engine = engine


def get_engine() -> ReelSiftEngine:
    """Return the running ReelSift engine.

    Raises:
        RuntimeError: If called before the lifespan has built the engine.
    """
    if _engine is None:
        raise RuntimeError("ReelSift engine not initialized. Is the server running?")
    return _engine


EngineDep = Annotated[ReelSiftEngine, Depends(get_engine)]

LazyFlag = Annotated[
    bool,
    Query(description="Serve a valid stored record instead of querying the provider"),
]

ProviderFilter = Annotated[
    str | None,
    Query(description="Restrict the search to one provider (its errors are returned)"),
]
