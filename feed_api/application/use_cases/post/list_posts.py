# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostListResponse
from .mappers import posts_with_creators

POSTS_PER_PAGE = 2


class ListPostsUseCase:
    """Use case for listing one page of posts, most recent first"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, auth: AuthResult, page: Optional[int] = None) -> PostListResponse:
        """
        List a page of posts

        Args:
            auth: Authentication result of the request
            page: 1-based page number; missing or < 1 means the first page

        Returns:
            PostListResponse with the page's posts and the total post count

        Raises:
            AuthError: If the request is anonymous
        """
        require_authenticated(auth)

        current_page = page if page and page > 0 else 1
        skip = (current_page - 1) * POSTS_PER_PAGE

        total_items = await self.post_repository.count()
        posts = await self.post_repository.list_recent(skip=skip, limit=POSTS_PER_PAGE)

        creators = await self.user_repository.find_by_ids({p.creator_id for p in posts})
        return PostListResponse(
            posts=posts_with_creators(posts, creators),
            total_items=total_items,
        )
