"""
Pytest configuration for the stories backend.

Stores run against in-memory SQLite, the HTTP tests either go through the
real lifespan (same in-memory database) or override the store dependency
with a fake from tests.fakes.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.story_store import get_story_store
from core.db import connect_db
from core.settings import settings
from core.story_store import StoryStore
from main import app
from tests.fakes import InMemoryStoryStore, UnavailableStoryStore

IN_MEMORY_DB = "sqlite://"


@pytest.fixture
def engine():
    engine = connect_db(IN_MEMORY_DB)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return StoryStore(engine)


@pytest.fixture
def client(monkeypatch):
    """Client running the real lifespan against a fresh in-memory database."""
    monkeypatch.setattr(settings, "CONNECTION_STRING", IN_MEMORY_DB)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fake_store():
    return InMemoryStoryStore()


@pytest.fixture
def fake_client(fake_store):
    """Client without lifespan, the store is replaced by an in-memory fake."""
    app.dependency_overrides[get_story_store] = lambda: fake_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unavailable_client():
    app.dependency_overrides[get_story_store] = lambda: UnavailableStoryStore()
    yield TestClient(app)
    app.dependency_overrides.clear()
