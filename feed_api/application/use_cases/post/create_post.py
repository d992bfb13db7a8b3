# Standard library imports
import logging

# Local application imports
from ....core.errors import AuthError
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.models.post import Post
from ....domain.ports.notifier import POSTS_CHANNEL, Notifier
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostInput, PostResponse
from .mappers import post_to_response
from .validation import validate_post_input

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a post owned by the acting user"""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        notifier: Notifier,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.notifier = notifier

    async def execute(self, auth: AuthResult, post_input: PostInput) -> PostResponse:
        """
        Create a new post

        Args:
            auth: Authentication result of the request
            post_input: Title, content and stored image path

        Returns:
            PostResponse with the created post and its creator summary

        Raises:
            AuthError: If the request is anonymous or the token's user no longer exists
            ValidationError: If title, content or image is invalid
        """
        user_id = require_authenticated(auth)
        validate_post_input(
            post_input.title,
            post_input.content,
            post_input.image_url,
            require_image=True,
        )

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise AuthError("Invalid user.")

        new_post = Post(
            id=None,  # Will be set by repository
            title=post_input.title,
            content=post_input.content,
            image_url=post_input.image_url,
            creator_id=user.id,
        )
        saved_post = await self.post_repository.save(new_post)

        # Not atomic with the insert above: a failure here leaves the post
        # without its back-reference on the user.
        await self.user_repository.add_post(user.id, saved_post.id)
        logger.info(f"User {user.id} created post {saved_post.id}")

        response = post_to_response(saved_post, user)
        self.notifier.publish(POSTS_CHANNEL, {"action": "create", "post": response.to_wire()})
        return response
