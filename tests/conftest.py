"""
Shared pytest fixtures for feed-api tests.
"""
import os
from unittest.mock import patch

import pytest

from feed_api.core.config import Settings
from feed_api.core.security import TokenService
from feed_api.domain.models.auth import Authenticated
from tests.fakes import (
    InMemoryPostRepository,
    InMemoryUserRepository,
    RecordingImageStore,
    RecordingNotifier,
)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_feed_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "ACCESS_TOKEN_EXPIRE_MINUTES": "60",
        "IMAGE_UPLOAD_DIR": "images",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env):
    return Settings()


@pytest.fixture
def token_service():
    return TokenService(secret_key="test_jwt_secret", algorithm="HS256", expire_minutes=60)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def image_store():
    return RecordingImageStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def auth_for():
    """Build an AuthResult for a user id"""
    return lambda user_id: Authenticated(user_id=user_id)
