# Standard library imports
import logging

# Local application imports
from ....core.errors import AuthorizationError
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.ports.image_store import ImageStore
from ....domain.ports.notifier import POSTS_CHANNEL, Notifier
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from .mappers import load_post

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post; only its creator may do so"""

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

    async def execute(self, auth: AuthResult, post_id: str) -> bool:
        """
        Delete a post, its image and the creator's back-reference

        Raises:
            AuthError: If the request is anonymous
            NotFoundError: If no post has this ID
            AuthorizationError: If the acting user is not the post's creator
        """
        user_id = require_authenticated(auth)
        post = await load_post(self.post_repository, post_id)

        if not post.is_owned_by(user_id):
            raise AuthorizationError("Not authorized!")

        # Fire-and-forget; the store logs failures
        self.image_store.delete(post.image_url)

        await self.post_repository.delete(post.id)
        # Independent write: the post is already gone if this fails
        await self.user_repository.remove_post(post.creator_id, post.id)
        logger.info(f"User {user_id} deleted post {post.id}")

        self.notifier.publish(POSTS_CHANNEL, {"action": "delete", "post": post.id})
        return True
