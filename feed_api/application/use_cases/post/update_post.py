# Standard library imports
import logging

# Local application imports
from ....core.errors import AuthorizationError
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.ports.image_store import ImageStore
from ....domain.ports.notifier import POSTS_CHANNEL, Notifier
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostInput, PostResponse
from .mappers import load_post, post_to_response
from .validation import is_image_supplied, validate_post_input

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for editing a post; only its creator may do so"""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        image_store: ImageStore,
        notifier: Notifier,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.image_store = image_store
        self.notifier = notifier

    async def execute(self, auth: AuthResult, post_id: str, post_input: PostInput) -> PostResponse:
        """
        Update title, content and optionally the image of a post

        Args:
            auth: Authentication result of the request
            post_id: ID of the post to update
            post_input: New values; image_url None or "undefined" keeps the current image

        Returns:
            PostResponse with the updated post

        Raises:
            AuthError: If the request is anonymous
            NotFoundError: If no post has this ID
            AuthorizationError: If the acting user is not the post's creator
            ValidationError: If title or content is invalid
        """
        user_id = require_authenticated(auth)
        post = await load_post(self.post_repository, post_id)

        if not post.is_owned_by(user_id):
            raise AuthorizationError("Not authorized!")

        validate_post_input(post_input.title, post_input.content)

        old_image_url = post.image_url
        post.title = post_input.title
        post.content = post_input.content
        if is_image_supplied(post_input.image_url):
            post.image_url = post_input.image_url

        updated_post = await self.post_repository.save(post)

        if updated_post.image_url != old_image_url:
            # Fire-and-forget; the store logs failures
            self.image_store.delete(old_image_url)

        creator = await self.user_repository.find_by_id(updated_post.creator_id)
        response = post_to_response(updated_post, creator)
        logger.info(f"User {user_id} updated post {updated_post.id}")
        self.notifier.publish(POSTS_CHANNEL, {"action": "update", "post": response.to_wire()})
        return response
