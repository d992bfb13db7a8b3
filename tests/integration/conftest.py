"""
Fixtures for API tests.

The application is created without running its lifespan (no MongoDB); the DI
container and the request's AuthResult are replaced through FastAPI
dependency overrides.
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from feed_api.api.rest.dependencies import get_auth_result, get_container
from feed_api.application.dto.post_dto import CreatorSummary, PostResponse
from feed_api.domain.models.auth import Authenticated


class AuthState:
    """Mutable AuthResult returned by the overridden dependency"""

    def __init__(self) -> None:
        self.value = Authenticated(user_id="usr-1")


@pytest.fixture
def auth_state():
    return AuthState()


@pytest.fixture
def registry():
    """Maps classes to the objects the mocked container hands out"""
    return {}


@pytest.fixture
def mock_container(registry):
    container = MagicMock()
    container.get.side_effect = lambda cls: registry[cls]
    return container


@pytest.fixture
def app(mock_container, auth_state):
    from feed_api.main import create_application

    application = create_application()
    application.dependency_overrides[get_container] = lambda: mock_container
    application.dependency_overrides[get_auth_result] = lambda: auth_state.value
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_post():
    def _make(post_id="pst-1", title="A title", image_url="images/a.png", creator_id="usr-1"):
        stamp = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        return PostResponse(
            id=post_id,
            title=title,
            content="Some content",
            image_url=image_url,
            creator=CreatorSummary(id=creator_id, name="Alice"),
            created_at=stamp,
            updated_at=stamp,
        )
    return _make
