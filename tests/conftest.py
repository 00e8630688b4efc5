"""
Test configuration and fixtures for FastAPI URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from main import app
from shortener_app.dependencies import get_url_store
from shortener_app.storage.strategies import InMemoryURLStore


@pytest.fixture(scope="function")
def url_store():
    """
    Create a fresh URL store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    store = InMemoryURLStore()
    yield store
    store.clear()


@pytest.fixture(scope="function")
def client(url_store):
    """
    Create a test client with the store dependency overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_url_store] = lambda: url_store

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
