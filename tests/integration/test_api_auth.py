"""
Integration tests for /auth endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from feed_api.application.dto.auth_dto import SignupRequest, TokenResponse
from feed_api.application.dto.user_dto import StatusResponse, UserResponse
from feed_api.application.use_cases.auth import (
    GetUserStatusUseCase,
    LoginUserUseCase,
    SignupUserUseCase,
    UpdateUserStatusUseCase,
)
from feed_api.core.errors import AuthError, ConflictError, ValidationError
from feed_api.domain.models.auth import ANONYMOUS, Authenticated


@pytest.fixture
def mock_signup_use_case(registry):
    registry[SignupUserUseCase] = uc = AsyncMock(spec=SignupUserUseCase)
    return uc


@pytest.fixture
def mock_login_use_case(registry):
    registry[LoginUserUseCase] = uc = AsyncMock(spec=LoginUserUseCase)
    return uc


@pytest.fixture
def mock_status_use_cases(registry):
    registry[GetUserStatusUseCase] = get_uc = AsyncMock(spec=GetUserStatusUseCase)
    registry[UpdateUserStatusUseCase] = update_uc = AsyncMock(spec=UpdateUserStatusUseCase)
    return get_uc, update_uc


class TestSignup:
    """Tests for PUT /auth/signup"""

    def test_signup_success(self, client, mock_signup_use_case):
        mock_signup_use_case.execute.return_value = UserResponse(
            id="usr-1",
            name="Test User",
            email="test@example.com",
            status="I am new!",
        )
        response = client.put(
            "/auth/signup",
            json={"email": "test@example.com", "name": "Test User", "password": "password123"},
        )
        assert response.status_code == 201
        assert response.json() == {"message": "User created!", "userId": "usr-1"}
        mock_signup_use_case.execute.assert_awaited_once_with(
            SignupRequest(email="test@example.com", name="Test User", password="password123")
        )

    def test_validation_error_body(self, client, mock_signup_use_case):
        mock_signup_use_case.execute.side_effect = ValidationError(
            "Invalid input.", ["E-Mail is invalid.", "Password too short!"]
        )
        response = client.put("/auth/signup", json={"email": "x", "name": "Test", "password": "1"})

        assert response.status_code == 422
        assert response.json() == {
            "message": "Invalid input.",
            "data": [{"message": "E-Mail is invalid."}, {"message": "Password too short!"}],
        }

    def test_duplicate_returns_409(self, client, mock_signup_use_case):
        mock_signup_use_case.execute.side_effect = ConflictError("User exists already!")
        response = client.put(
            "/auth/signup",
            json={"email": "existing@example.com", "name": "Test", "password": "password123"},
        )
        assert response.status_code == 409
        assert response.json()["message"] == "User exists already!"


class TestLogin:
    """Tests for POST /auth/login"""

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = TokenResponse(token="jwt.token.here", user_id="usr-1")
        response = client.post(
            "/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 200
        assert response.json() == {"token": "jwt.token.here", "userId": "usr-1"}

    def test_wrong_password_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = AuthError("Wrong password!")
        response = client.post(
            "/auth/login",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )
        assert response.status_code == 401
        assert response.json() == {"message": "Wrong password!", "data": None}


class TestStatus:
    """Tests for GET/PATCH /auth/status"""

    def test_get_status(self, client, auth_state, mock_status_use_cases):
        get_uc, _ = mock_status_use_cases
        get_uc.execute.return_value = StatusResponse(status="I am new!")

        response = client.get("/auth/status")

        assert response.status_code == 200
        assert response.json() == {"status": "I am new!"}
        get_uc.execute.assert_awaited_once_with(Authenticated(user_id="usr-1"))

    def test_update_status(self, client, mock_status_use_cases):
        _, update_uc = mock_status_use_cases
        update_uc.execute.return_value = UserResponse(
            id="usr-1", name="Test", email="test@example.com", status="Busy"
        )

        response = client.patch("/auth/status", json={"status": "Busy"})

        assert response.status_code == 200
        assert response.json() == {"message": "User updated."}
        update_uc.execute.assert_awaited_once_with(Authenticated(user_id="usr-1"), "Busy")

    def test_anonymous_gets_401(self, client, auth_state, mock_status_use_cases):
        get_uc, _ = mock_status_use_cases
        get_uc.execute.side_effect = AuthError("Not authenticated!")
        auth_state.value = ANONYMOUS

        response = client.get("/auth/status")

        assert response.status_code == 401
        get_uc.execute.assert_awaited_once_with(ANONYMOUS)


class TestRequestErrors:
    """Framework-level request failures share the {message, data} envelope"""

    def test_missing_login_field(self, client, mock_login_use_case):
        response = client.post("/auth/login", json={"email": "a@b.com"})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Invalid input."
        assert body["data"] == [{"message": "Field required"}]
        mock_login_use_case.execute.assert_not_awaited()

    def test_non_numeric_page(self, client, registry):
        response = client.get("/feed/posts", params={"page": "abc"})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Invalid input."
        assert len(body["data"]) == 1
        assert "integer" in body["data"][0]["message"]

    def test_unknown_route(self, client):
        response = client.get("/auth/nowhere")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found", "data": None}

    def test_wrong_method(self, client):
        response = client.delete("/auth/login")

        assert response.status_code == 405
        assert response.json() == {"message": "Method Not Allowed", "data": None}
