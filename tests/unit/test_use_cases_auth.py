"""
Unit tests for auth use cases (Signup, Login, GetCurrentUser, status).
"""
from unittest.mock import AsyncMock

import pytest
from feed_api.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from feed_api.core.security import hash_password, verify_password
from feed_api.application.use_cases.auth.signup_user import SignupUserUseCase
from feed_api.application.use_cases.auth.login_user import LoginUserUseCase
from feed_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from feed_api.application.use_cases.auth.get_user_status import GetUserStatusUseCase
from feed_api.application.use_cases.auth.update_user_status import UpdateUserStatusUseCase
from feed_api.application.dto.auth_dto import LoginRequest, SignupRequest, TokenResponse
from feed_api.domain.models.auth import ANONYMOUS
from feed_api.domain.models.user import DEFAULT_STATUS, User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


async def _signup(user_repo, email="test@example.com", name="Test User", password="secret1"):
    use_case = SignupUserUseCase(user_repo)
    return await use_case.execute(SignupRequest(email=email, name=name, password=password))


class TestSignupUserUseCase:
    """Tests for SignupUserUseCase"""

    @pytest.mark.asyncio
    async def test_signup_success(self, user_repo):
        result = await _signup(user_repo)

        assert result.id
        assert result.email == "test@example.com"
        assert result.name == "Test User"
        assert result.status == DEFAULT_STATUS
        assert result.posts == []

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, user_repo):
        result = await _signup(user_repo, password="plaintext")

        stored = user_repo.users[result.id]
        assert stored.hashed_password != "plaintext"
        assert verify_password("plaintext", stored.hashed_password) is True

    @pytest.mark.asyncio
    async def test_response_has_no_password(self, user_repo):
        result = await _signup(user_repo)
        assert "password" not in result.to_wire()
        assert "hashedPassword" not in result.to_wire()

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, user_repo):
        await _signup(user_repo)
        with pytest.raises(ConflictError, match="User exists already!"):
            await _signup(user_repo, name="Someone Else")

    @pytest.mark.asyncio
    async def test_invalid_fields_reported_together(self, mock_user_repo):
        with pytest.raises(ValidationError) as exc_info:
            await _signup(mock_user_repo, email="not-an-email", name="   ", password="1234")

        error = exc_info.value
        assert error.message == "Invalid input."
        assert error.status_code == 422
        assert error.messages == ["E-Mail is invalid.", "Name is invalid.", "Password too short!"]
        assert error.data == [
            {"message": "E-Mail is invalid."},
            {"message": "Name is invalid."},
            {"message": "Password too short!"},
        ]
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_of_five_characters_accepted(self, user_repo):
        result = await _signup(user_repo, password="12345")
        assert result.id


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, token_service):
        user = User(
            id="usr-123",
            name="Test User",
            email="test@example.com",
            hashed_password=hash_password("validpass123"),
        )
        mock_user_repo.find_by_email.return_value = user

        use_case = LoginUserUseCase(mock_user_repo, token_service)
        result = await use_case.execute(
            LoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, TokenResponse)
        assert result.user_id == "usr-123"

        claims = token_service.decode_token(result.token)
        assert claims["userId"] == "usr-123"
        assert claims["email"] == "test@example.com"
        assert claims["exp"] - claims["iat"] == 3600

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo, token_service):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo, token_service)
        with pytest.raises(AuthError, match="A user with this email could not be found."):
            await use_case.execute(
                LoginRequest(email="unknown@example.com", password="anypass123")
            )

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, token_service):
        user = User(
            id="usr-1",
            name="Test",
            email="test@example.com",
            hashed_password=hash_password("correctpass"),
        )
        mock_user_repo.find_by_email.return_value = user

        use_case = LoginUserUseCase(mock_user_repo, token_service)
        with pytest.raises(AuthError, match="Wrong password!") as exc_info:
            await use_case.execute(
                LoginRequest(email="test@example.com", password="wrongpassword")
            )
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_signup_then_login(self, user_repo, token_service):
        created = await _signup(user_repo, password="hunter22")
        use_case = LoginUserUseCase(user_repo, token_service)
        result = await use_case.execute(LoginRequest(email="test@example.com", password="hunter22"))
        assert result.user_id == created.id


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_current_user_success(self, user_repo, auth_for):
        created = await _signup(user_repo)
        result = await GetCurrentUserUseCase(user_repo).execute(auth_for(created.id))
        assert result.id == created.id
        assert result.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_anonymous_raises(self, mock_user_repo):
        with pytest.raises(AuthError, match="Not authenticated!"):
            await GetCurrentUserUseCase(mock_user_repo).execute(ANONYMOUS)
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_current_user_not_found_raises(self, mock_user_repo, auth_for):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="User not found."):
            await GetCurrentUserUseCase(mock_user_repo).execute(auth_for("nonexistent"))


class TestUserStatus:
    """Tests for GetUserStatusUseCase and UpdateUserStatusUseCase"""

    @pytest.mark.asyncio
    async def test_new_user_has_default_status(self, user_repo, auth_for):
        created = await _signup(user_repo)
        result = await GetUserStatusUseCase(user_repo).execute(auth_for(created.id))
        assert result.status == "I am new!"

    @pytest.mark.asyncio
    async def test_update_then_get(self, user_repo, auth_for):
        created = await _signup(user_repo)
        auth = auth_for(created.id)

        updated = await UpdateUserStatusUseCase(user_repo).execute(auth, "Busy writing")
        assert updated.status == "Busy writing"

        result = await GetUserStatusUseCase(user_repo).execute(auth)
        assert result.status == "Busy writing"

    @pytest.mark.asyncio
    async def test_status_requires_authentication(self, mock_user_repo):
        with pytest.raises(AuthError):
            await UpdateUserStatusUseCase(mock_user_repo).execute(ANONYMOUS, "x")
        with pytest.raises(AuthError):
            await GetUserStatusUseCase(mock_user_repo).execute(ANONYMOUS)

    @pytest.mark.asyncio
    async def test_status_of_missing_user(self, mock_user_repo, auth_for):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await GetUserStatusUseCase(mock_user_repo).execute(auth_for("gone"))
