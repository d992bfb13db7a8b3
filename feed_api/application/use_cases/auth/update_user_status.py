# Standard library imports
import logging

# Local application imports
from ....domain.models.auth import AuthResult
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from .get_current_user import load_acting_user
from .mappers import user_to_response

logger = logging.getLogger(__name__)


class UpdateUserStatusUseCase:
    """Use case for changing the authenticated user's status"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, auth: AuthResult, status: str) -> UserResponse:
        """
        Persist a new status for the acting user

        Args:
            auth: Authentication result of the request
            status: New free-text status

        Returns:
            UserResponse with the updated user

        Raises:
            AuthError: If the request is anonymous
            NotFoundError: If the user no longer exists
        """
        user = await load_acting_user(self.user_repository, auth)
        user.status = status
        saved_user = await self.user_repository.save(user)
        logger.debug(f"Updated status for user {saved_user.id}")
        return user_to_response(saved_user)
