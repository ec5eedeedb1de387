"""Shared fixtures for API tests."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.dependencies import get_feed_service
from src.ingestion.schemas import Feed


@pytest.fixture
def mock_feed_service(sample_feed: Feed):
    """Mock FeedService returning the sample feed."""
    service = AsyncMock()
    service.build_feed = AsyncMock(return_value=sample_feed)
    return service


@pytest.fixture
def client(mock_feed_service):
    """Test client with the feed service overridden."""
    app = create_app()
    app.dependency_overrides[get_feed_service] = lambda: mock_feed_service
    return TestClient(app)
