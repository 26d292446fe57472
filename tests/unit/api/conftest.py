"""Fixtures for API endpoint tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from reelsift.api.app import create_app
from reelsift.api.deps import set_engine
from reelsift.config.settings import Settings
from reelsift.core.engine import ReelSiftEngine


@pytest.fixture
def client(settings: Settings, engine: ReelSiftEngine) -> Iterator[TestClient]:
    """Create a test client wired to the fake-provider engine."""
    app = create_app(settings)
    set_engine(engine)
    yield TestClient(app)
    set_engine(None)
