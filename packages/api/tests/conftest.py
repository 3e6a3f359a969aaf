# This project was developed with assistance from AI tools.
"""Shared fixtures for API unit tests."""

import pytest
from db import get_db
from fastapi.testclient import TestClient

from src.core.config import settings
from src.inference.config import ProviderConfig, ProviderKind
from src.main import app
from src.routes.ai import get_chat_provider

from .factories import make_mock_session


@pytest.fixture
def mock_session():
    """Empty mock DB session; tests reconfigure results as needed."""
    return make_mock_session()


@pytest.fixture
def client(monkeypatch, mock_session):
    """TestClient for the real app with auth bypassed and the DB mocked.

    The chat provider is pinned to the keyword simulator so no test goes
    over the network.
    """
    monkeypatch.setattr(settings, "AUTH_DISABLED", True)

    async def fake_db():
        yield mock_session

    app.dependency_overrides[get_db] = fake_db
    app.dependency_overrides[get_chat_provider] = lambda: ProviderConfig(
        kind=ProviderKind.SIMULATED
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
