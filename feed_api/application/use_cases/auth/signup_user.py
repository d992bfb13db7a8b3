# Standard library imports
import asyncio
import logging
from typing import List

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ....core.errors import ConflictError, ValidationError
from ....core.security import hash_password
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import SignupRequest
from ...dto.user_dto import UserResponse
from .mappers import user_to_response

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 5


def _is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class SignupUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def _validate(self, request: SignupRequest) -> None:
        errors: List[str] = []
        if not _is_valid_email(request.email or ""):
            errors.append("E-Mail is invalid.")
        if not request.name or not request.name.strip():
            errors.append("Name is invalid.")
        if not request.password or len(request.password) < MIN_PASSWORD_LENGTH:
            errors.append("Password too short!")
        if errors:
            raise ValidationError("Invalid input.", errors)

    async def execute(self, request: SignupRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Signup request with email, name and password

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If email, name or password is invalid
            ConflictError: If a user with this email already exists
        """
        self._validate(request)

        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("User exists already!")

        # bcrypt is CPU bound; keep the event loop free
        hashed_password = await asyncio.to_thread(hash_password, request.password)

        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            name=request.name.strip(),
            hashed_password=hashed_password,
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Created user {saved_user.id}")
        return user_to_response(saved_user)
