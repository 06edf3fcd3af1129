"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.shared.database.seed import seed_sample_data
from app.shared.database.store import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """An empty store with the default approval policy."""
    return MemoryStore()


@pytest.fixture
def seeded_store() -> MemoryStore:
    store = MemoryStore()
    seed_sample_data(store)
    return store


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_sample_data=False, log_level="WARNING")


@pytest.fixture
def client(store: MemoryStore, test_settings: Settings) -> TestClient:
    """Client over an app bound to the empty ``store`` fixture."""
    return TestClient(create_app(settings=test_settings, store=store))


@pytest.fixture
def seeded_client(seeded_store: MemoryStore, test_settings: Settings) -> TestClient:
    return TestClient(create_app(settings=test_settings, store=seeded_store))
