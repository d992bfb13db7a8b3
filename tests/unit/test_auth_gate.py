"""
Unit tests for AuthGate (bearer token -> AuthResult) and the request dependency
"""
from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from feed_api.api.rest.dependencies import get_auth_result, get_container
from feed_api.application.services.auth_gate import AuthGate
from feed_api.core.errors import AuthError
from feed_api.core.security import TokenService
from feed_api.domain.models.auth import ANONYMOUS, Authenticated, AuthResult, require_authenticated


@pytest.fixture
def gate(token_service):
    return AuthGate(token_service)


class TestAuthGate:
    def test_valid_token_is_authenticated(self, gate, token_service):
        token = token_service.create_token({"email": "a@b.com", "userId": "u-1"})
        result = gate.resolve_token(token)
        assert result == Authenticated(user_id="u-1")
        assert result.is_authenticated is True

    def test_missing_token_is_anonymous(self, gate):
        assert gate.resolve_token(None) is ANONYMOUS
        assert gate.resolve_token("") is ANONYMOUS

    def test_invalid_token_is_anonymous(self, gate):
        assert gate.resolve_token("not.a.token") is ANONYMOUS

    def test_token_from_other_secret_is_anonymous(self, gate):
        foreign = TokenService(secret_key="someone_else").create_token({"userId": "u-1"})
        assert gate.resolve_token(foreign) is ANONYMOUS

    def test_token_without_user_claim_is_anonymous(self, gate):
        token = gate.token_service.create_token({"email": "a@b.com"})
        assert gate.resolve_token(token) is ANONYMOUS


class TestGetAuthResult:
    """The Authorization header is parsed by HTTPBearer and resolved by the gate"""

    @pytest.fixture
    def client(self, gate):
        container = MagicMock()
        container.get.side_effect = lambda cls: gate

        application = FastAPI()

        @application.get("/whoami")
        async def whoami(auth: AuthResult = Depends(get_auth_result)):
            return {"userId": auth.user_id if auth.is_authenticated else None}

        application.dependency_overrides[get_container] = lambda: container
        return TestClient(application)

    def test_bearer_token(self, client, token_service):
        token = token_service.create_token({"userId": "u-1"})
        response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
        assert response.json() == {"userId": "u-1"}

    def test_no_header(self, client):
        assert client.get("/whoami").json() == {"userId": None}

    def test_wrong_scheme(self, client, token_service):
        token = token_service.create_token({"userId": "u-1"})
        response = client.get("/whoami", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 200
        assert response.json() == {"userId": None}

    def test_invalid_token(self, client):
        response = client.get("/whoami", headers={"Authorization": "Bearer not.a.token"})
        assert response.json() == {"userId": None}


class TestRequireAuthenticated:
    def test_returns_user_id(self):
        assert require_authenticated(Authenticated(user_id="u-9")) == "u-9"

    def test_anonymous_raises(self):
        with pytest.raises(AuthError, match="Not authenticated!"):
            require_authenticated(ANONYMOUS)
