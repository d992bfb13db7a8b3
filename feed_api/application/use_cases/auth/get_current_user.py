# Local application imports
from ....core.errors import NotFoundError
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from .mappers import user_to_response


async def load_acting_user(user_repository: UserRepository, auth: AuthResult) -> User:
    """Resolve the authenticated user or raise NotFoundError"""
    user_id = require_authenticated(auth)
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found.")
    return user


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user's profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, auth: AuthResult) -> UserResponse:
        user = await load_acting_user(self.user_repository, auth)
        return user_to_response(user)
