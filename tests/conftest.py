"""
Shared test fixtures and configuration for entire test suite.

Provides: Collaborator mocks (fetcher, embedder, completion), in-memory store,
settings without .env or environment leakage
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest

from webrag.boundary.vdb import InMemoryVectorStore
from webrag.configs import IngestionSettings, Settings, get_settings


def keyword_vector(text: str) -> list[float]:
    """Deterministic 4-d embedding: counts of a few marker words plus a bias term."""
    lowered = text.lower()
    return [
        float(lowered.count("paris")),
        float(lowered.count("berlin")),
        float(lowered.count("x")),
        1.0,
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings accessor between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def keyword_embedding():
    """The deterministic embedding function used by mock_embedder."""
    return keyword_vector


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """Fetcher returning a fixed 1700-character document."""
    fetcher = AsyncMock()
    fetcher.fetch = AsyncMock(return_value="x" * 1700)
    return fetcher


@pytest.fixture
def mock_embedder() -> AsyncMock:
    """Embedder producing deterministic keyword vectors."""
    embedder = AsyncMock()
    embedder.embed = AsyncMock(side_effect=keyword_vector)
    return embedder


@pytest.fixture
def mock_completion() -> AsyncMock:
    """Completion service that always answers "Paris"."""
    completion = AsyncMock()
    completion.complete = AsyncMock(return_value="Paris")
    return completion


@pytest.fixture
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def ingestion_settings() -> IngestionSettings:
    """Ingestion settings built without reading .env."""
    return IngestionSettings(_env_file=None, chunk_size=800, max_content_length=5000)


@pytest.fixture
def app_settings() -> Settings:
    """Application settings with a dummy API key and no .env file."""
    return Settings(_env_file=None, google_api_key="test-key")
