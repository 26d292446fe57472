"""Provider Registry — Resolves providers by name or by originating URL.

A registry is built once, from an explicit ordered list of provider
factories, and is read-only afterwards. Each provider is indexed twice:

  - by its upper-cased name, for case-insensitive name lookup
  - by the hostname of its canonical URL, for URL routing; one host may serve
    several providers under different path prefixes, in which case the first
    registered provider whose path prefixes the URL path wins
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

import httpx

from reelsift.providers.base import Provider, RequestTimeoutSetter
from reelsift.providers.exceptions import (
    ConfigurationError,
    ProviderInvariantError,
    ProviderNotFoundError,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Provider)

ProviderFactory = Callable[[], Provider]


class ProviderRegistry(Generic[P]):
    """Registry of providers for one entity kind.

    Example:
        >>> registry = ProviderRegistry("actor", ActorProvider, [FooProvider, BarProvider], timeout=10)
        >>> registry.get("foo") is registry.get("FOO")
        True
        >>> registry.get_by_url("https://foo.example.com/actor/123")
        <FooProvider ...>

    Args:
        kind: Entity kind, used in error messages and logs.
        provider_type: Capability class every registered provider must implement.
        factories: Provider constructors, called once each in order.
        timeout: Request timeout applied to providers implementing
            ``RequestTimeoutSetter``. ``None`` leaves provider defaults.
    """

    def __init__(
        self,
        kind: str,
        provider_type: type[P],
        factories: Iterable[ProviderFactory],
        timeout: float | None = None,
    ) -> None:
        self.kind = kind
        self._provider_type = provider_type
        self._providers: dict[str, P] = {}
        self._host_providers: dict[str, list[P]] = {}
        for factory in factories:
            self._register(factory(), timeout)

    def _register(self, provider: Provider, timeout: float | None) -> None:
        if not isinstance(provider, self._provider_type):
            raise ConfigurationError(
                f"{type(provider).__name__} does not implement {self._provider_type.__name__}"
            )
        key = provider.name.upper()
        if key in self._providers:
            raise ConfigurationError(f"Duplicate {self.kind} provider name: {provider.name}")

        if timeout is not None and isinstance(provider, RequestTimeoutSetter):
            provider.set_request_timeout(timeout)

        self._providers[key] = provider
        self._host_providers.setdefault(provider.url.host, []).append(provider)
        logger.info("Registered %s provider: %s (%s)", self.kind, provider.name, provider.url)

    def get(self, name: str) -> P:
        """Get a provider by name (case-insensitive).

        Raises:
            ProviderNotFoundError: If no provider is registered under *name*.
        """
        provider = self._providers.get(name.upper())
        if provider is None:
            raise ProviderNotFoundError(f"{self.kind} provider not found: {name}")
        return provider

    def get_by_url(self, raw_url: str) -> P:
        """Get the provider serving *raw_url*.

        Raises:
            ProviderNotFoundError: If no provider matches the URL host and path.
        """
        try:
            url = httpx.URL(raw_url)
        except httpx.InvalidURL as e:
            raise ProviderNotFoundError(f"{self.kind} provider not found: {raw_url}") from e

        for provider in self._host_providers.get(url.host, []):
            if url.path.startswith(provider.url.path):
                return provider
        raise ProviderNotFoundError(f"{self.kind} provider not found: {raw_url}")

    def must_get(self, name: str) -> P:
        """Get a provider that is known to be registered.

        Raises:
            ProviderInvariantError: If the provider is missing.
        """
        try:
            return self.get(name)
        except ProviderNotFoundError as e:
            raise ProviderInvariantError(str(e)) from e

    def contains(self, name: str) -> bool:
        return name.upper() in self._providers

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> Iterator[P]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)

    @property
    def names(self) -> list[str]:
        """Registered provider names, in registration order."""
        return [p.name for p in self._providers.values()]


def import_factory(path: str) -> ProviderFactory:
    """Import a provider factory from a ``"package.module:Name"`` path.

    Raises:
        ConfigurationError: If the path is malformed or cannot be imported.
    """
    module_path, sep, attr = path.partition(":")
    if not sep or not module_path or not attr:
        raise ConfigurationError(f"Invalid provider path '{path}', expected 'module:Factory'")
    try:
        module = importlib.import_module(module_path)
        factory = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Failed to import provider '{path}': {e}") from e
    if not callable(factory):
        raise ConfigurationError(f"Provider '{path}' is not callable")
    return factory
