# Standard library imports
import asyncio

# Local application imports
from ....core.errors import AuthError
from ....core.security import TokenService, verify_password
from ....domain.constants import UserFields
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import LoginRequest, TokenResponse
from ...services.auth_gate import USER_ID_CLAIM


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse with the signed token and the user's ID

        Raises:
            AuthError: If no user has this email or the password is wrong
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise AuthError("A user with this email could not be found.")

        is_equal = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not is_equal:
            raise AuthError("Wrong password!")

        user_id = user.id or ""
        token = self.token_service.create_token({
            UserFields.EMAIL: user.email,
            USER_ID_CLAIM: user_id,
        })
        return TokenResponse(token=token, user_id=user_id)
