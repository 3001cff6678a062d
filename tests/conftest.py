"""Shared test fixtures.

Provides a FastAPI ``TestClient`` whose lifespan is wired to an in-memory
fake Elasticsearch (or a bare mock) instead of a real cluster.
"""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeElasticsearch


@pytest.fixture()
def fake_es() -> FakeElasticsearch:
    """Provide an empty in-memory Elasticsearch."""
    return FakeElasticsearch()


@pytest.fixture()
def test_client(fake_es: FakeElasticsearch) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by ``fake_es``."""
    from app.main import app

    with patch("app.main.create_es_client", return_value=fake_es):
        with TestClient(app) as client:
            yield client


@pytest.fixture()
def mock_es() -> MagicMock:
    """Provide a bare mock client for failure-path tests."""
    return MagicMock()


@pytest.fixture()
def mock_client(mock_es: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by ``mock_es``."""
    from app.main import app

    with patch("app.main.create_es_client", return_value=mock_es):
        with TestClient(app) as client:
            yield client
