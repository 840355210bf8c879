"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.services.storage import InMemoryKeyValueStore


@pytest.fixture
def settings():
    """Default settings, independent of the process environment."""
    return Settings(_env_file=None)


@pytest.fixture
def store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def client(store):
    """API client whose snapshot store is the in-memory fixture store."""
    from app.main import app
    from app.utils.storage import get_store

    app.dependency_overrides[get_store] = lambda: store
    test_client = TestClient(app)
    yield test_client
    test_client.close()
    app.dependency_overrides.clear()
