"""Metadata providers — Capability interfaces, registry, and HTTP plumbing.

Implement ``ActorProvider`` / ``MovieProvider`` (plus any optional
capabilities) to plug a new metadata source into ReelSift.
"""

from reelsift.providers.base import (
    ActorProvider,
    ActorSearcher,
    Fetcher,
    IdentityProvider,
    MovieProvider,
    MovieSearcher,
    Provider,
    RequestTimeoutSetter,
)
from reelsift.providers.http import HTTPProvider
from reelsift.providers.registry import ProviderRegistry

__all__ = [
    "ActorProvider",
    "ActorSearcher",
    "Fetcher",
    "HTTPProvider",
    "IdentityProvider",
    "MovieProvider",
    "MovieSearcher",
    "Provider",
    "ProviderRegistry",
    "RequestTimeoutSetter",
]
