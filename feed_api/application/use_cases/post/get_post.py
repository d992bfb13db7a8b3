# Local application imports
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostResponse
from .mappers import load_post, post_to_response


class GetPostUseCase:
    """Use case for getting a single post with its creator"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, auth: AuthResult, post_id: str) -> PostResponse:
        """
        Raises:
            AuthError: If the request is anonymous
            NotFoundError: If no post has this ID
        """
        require_authenticated(auth)
        post = await load_post(self.post_repository, post_id)
        creator = await self.user_repository.find_by_id(post.creator_id)
        return post_to_response(post, creator)
