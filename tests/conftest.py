"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from reelsift.config.settings import Settings
from reelsift.core.engine import ReelSiftEngine
from reelsift.providers.base import ActorProvider, MovieProvider
from reelsift.providers.registry import ProviderRegistry
from reelsift.store.memory import MemoryRecordStore
from tests.fakes import (
    FakeActorProvider,
    FakeActorSearcher,
    FakeIdentityActorProvider,
    FakeMovieProvider,
    make_actor,
    make_actor_result,
    make_movie,
)


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        providers={"request_timeout": 5, "search_timeout": 1},
    )


@pytest.fixture
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


# ── Providers ─────────────────────────────────────────────────────────────────


@pytest.fixture
def alpha() -> FakeActorSearcher:
    """High-priority searchable actor provider."""
    return FakeActorSearcher(
        "alpha",
        priority=10,
        records={"a1": make_actor("a1", "alpha", name="Aoi")},
        results=[make_actor_result("a1", "alpha"), make_actor_result("a2", "alpha")],
    )


@pytest.fixture
def beta() -> FakeActorSearcher:
    """Low-priority searchable actor provider."""
    return FakeActorSearcher(
        "beta",
        priority=5,
        records={"b1": make_actor("b1", "beta")},
        results=[make_actor_result("b1", "beta")],
    )


@pytest.fixture
def gamma() -> FakeActorProvider:
    """Actor provider without search capability."""
    return FakeActorProvider("gamma", records={"g1": make_actor("g1", "gamma")})


@pytest.fixture
def identity() -> FakeIdentityActorProvider:
    """Identity actor provider (always live, never stored)."""
    return FakeIdentityActorProvider(
        "identity",
        priority=1,
        records={"i1": make_actor("i1", "identity")},
        results=[make_actor_result("i1", "identity")],
    )


@pytest.fixture
def omega() -> FakeMovieProvider:
    return FakeMovieProvider(
        "omega",
        priority=3,
        records={"abc-001": make_movie("abc-001", "omega")},
        results=[make_movie("abc-001", "omega").to_search_result()],
    )


@pytest.fixture
def actor_registry(
    alpha: FakeActorSearcher,
    beta: FakeActorSearcher,
    gamma: FakeActorProvider,
    identity: FakeIdentityActorProvider,
) -> ProviderRegistry[ActorProvider]:
    return ProviderRegistry("actor", ActorProvider, [lambda: beta, lambda: alpha, lambda: gamma, lambda: identity])


@pytest.fixture
def movie_registry(omega: FakeMovieProvider) -> ProviderRegistry[MovieProvider]:
    return ProviderRegistry("movie", MovieProvider, [lambda: omega])


@pytest.fixture
def engine(
    settings: Settings,
    actor_registry: ProviderRegistry[ActorProvider],
    movie_registry: ProviderRegistry[MovieProvider],
    store: MemoryRecordStore,
) -> ReelSiftEngine:
    return ReelSiftEngine(
        settings,
        actor_providers=actor_registry,
        movie_providers=movie_registry,
        store=store,
    )
