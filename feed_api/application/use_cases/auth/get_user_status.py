# Local application imports
from ....domain.models.auth import AuthResult
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import StatusResponse
from .get_current_user import load_acting_user


class GetUserStatusUseCase:
    """Use case for reading the authenticated user's status"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, auth: AuthResult) -> StatusResponse:
        """
        Raises:
            AuthError: If the request is anonymous
            NotFoundError: If the user no longer exists
        """
        user = await load_acting_user(self.user_repository, auth)
        return StatusResponse(status=user.status)
