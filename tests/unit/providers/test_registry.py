"""Tests for the provider registry."""

from __future__ import annotations

import pytest

from reelsift.providers.base import ActorProvider, MovieProvider
from reelsift.providers.exceptions import (
    ConfigurationError,
    ProviderInvariantError,
    ProviderNotFoundError,
    ReelSiftError,
)
from reelsift.providers.registry import ProviderRegistry, import_factory
from tests.fakes import FakeActorProvider, FakeMovieProvider, FakeTimeoutActorProvider


def _registry(*providers: ActorProvider, timeout: float | None = None) -> ProviderRegistry[ActorProvider]:
    return ProviderRegistry("actor", ActorProvider, [lambda p=p: p for p in providers], timeout=timeout)


# ── Name resolution ──────────────────────────────────────────────────────────


class TestResolveByName:
    def test_case_insensitive(self) -> None:
        foo = FakeActorProvider("foo")
        registry = _registry(foo)
        assert registry.get("Foo") is foo
        assert registry.get("FOO") is foo
        assert registry.get("foo") is foo

    def test_unknown_name_raises(self) -> None:
        registry = _registry(FakeActorProvider("foo"))
        with pytest.raises(ProviderNotFoundError, match="bar"):
            registry.get("bar")

    def test_contains(self) -> None:
        registry = _registry(FakeActorProvider("foo"))
        assert registry.contains("FOO")
        assert "foo" in registry
        assert "bar" not in registry

    def test_names_keep_registration_order(self) -> None:
        registry = _registry(FakeActorProvider("zeta"), FakeActorProvider("alpha"), FakeActorProvider("mid"))
        assert registry.names == ["zeta", "alpha", "mid"]
        assert [p.name for p in registry] == ["zeta", "alpha", "mid"]
        assert len(registry) == 3

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate"):
            _registry(FakeActorProvider("foo"), FakeActorProvider("FOO", base_url="https://other.example.com/"))

    def test_wrong_provider_type_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="ActorProvider"):
            ProviderRegistry("actor", ActorProvider, [lambda: FakeMovieProvider("movies")])

    def test_empty_registry(self) -> None:
        registry = ProviderRegistry("movie", MovieProvider, [])
        assert len(registry) == 0
        with pytest.raises(ProviderNotFoundError):
            registry.get("anything")


# ── URL resolution ───────────────────────────────────────────────────────────


class TestResolveByURL:
    def test_matches_host(self) -> None:
        foo = FakeActorProvider("foo", base_url="https://foo.example.com/")
        registry = _registry(foo, FakeActorProvider("bar"))
        assert registry.get_by_url("https://foo.example.com/actor/123") is foo

    def test_path_prefix_selects_provider_on_shared_host(self) -> None:
        a = FakeActorProvider("a", base_url="https://shared.example.com/a/")
        b = FakeActorProvider("b", base_url="https://shared.example.com/b/")
        registry = _registry(a, b)
        assert registry.get_by_url("https://shared.example.com/b/actor/1") is b
        assert registry.get_by_url("https://shared.example.com/a/actor/1") is a

    def test_first_registered_wins_on_overlapping_prefix(self) -> None:
        first = FakeActorProvider("first", base_url="https://shared.example.com/")
        second = FakeActorProvider("second", base_url="https://shared.example.com/actors/")
        registry = _registry(first, second)
        assert registry.get_by_url("https://shared.example.com/actors/9") is first

    def test_known_host_unmatched_path_raises(self) -> None:
        registry = _registry(FakeActorProvider("foo", base_url="https://foo.example.com/actors/"))
        with pytest.raises(ProviderNotFoundError):
            registry.get_by_url("https://foo.example.com/movies/1")

    def test_unknown_host_raises(self) -> None:
        registry = _registry(FakeActorProvider("foo"))
        with pytest.raises(ProviderNotFoundError):
            registry.get_by_url("https://nowhere.example.org/actor/1")

    def test_unparseable_url_raises_not_found(self) -> None:
        registry = _registry(FakeActorProvider("foo"))
        with pytest.raises(ProviderNotFoundError):
            registry.get_by_url("https://foo.example.com:notaport/actor/1")


# ── Must-resolve ─────────────────────────────────────────────────────────────


class TestMustGet:
    def test_returns_registered_provider(self) -> None:
        foo = FakeActorProvider("foo")
        assert _registry(foo).must_get("FOO") is foo

    def test_missing_provider_is_invariant_error(self) -> None:
        with pytest.raises(ProviderInvariantError) as exc_info:
            _registry(FakeActorProvider("foo")).must_get("gone")
        assert not isinstance(exc_info.value, ReelSiftError)


# ── Timeout propagation ──────────────────────────────────────────────────────


class TestRequestTimeout:
    def test_timeout_applied_to_setters(self) -> None:
        provider = FakeTimeoutActorProvider("slow")
        _registry(provider, timeout=12.5)
        assert provider.request_timeout == 12.5

    def test_no_timeout_leaves_provider_default(self) -> None:
        provider = FakeTimeoutActorProvider("slow")
        _registry(provider)
        assert provider.request_timeout is None


# ── Factory import ───────────────────────────────────────────────────────────


class TestImportFactory:
    def test_imports_callable(self) -> None:
        factory = import_factory("tests.fakes:FakeMovieProvider")
        assert factory is FakeMovieProvider

    @pytest.mark.parametrize("path", ["tests.fakes", ":Fake", "tests.fakes:"])
    def test_malformed_path(self, path: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid provider path"):
            import_factory(path)

    def test_missing_module(self) -> None:
        with pytest.raises(ConfigurationError, match="Failed to import"):
            import_factory("tests.does_not_exist:Provider")

    def test_missing_attribute(self) -> None:
        with pytest.raises(ConfigurationError, match="Failed to import"):
            import_factory("tests.fakes:NoSuchProvider")
