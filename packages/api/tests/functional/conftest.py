# This project was developed with assistance from AI tools.
"""Functional-test fixtures: the real app, driven as a given persona.

``src.main.app`` is a module singleton, so overrides installed by one test
are cleared before the next.
"""

import pytest
from fastapi.testclient import TestClient

from src.inference.config import ProviderConfig
from src.main import app as real_app
from src.schemas.auth import UserContext

from .mock_db import configure_app_for_persona


@pytest.fixture(autouse=True)
def _clean_overrides():
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def make_client(app):
    """Return a factory: persona + session (+ provider) -> TestClient."""

    def _make(user: UserContext, session, provider: ProviderConfig | None = None) -> TestClient:
        configure_app_for_persona(app, user, session, provider)
        return TestClient(app)

    return _make
