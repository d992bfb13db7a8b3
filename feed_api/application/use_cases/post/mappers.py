# Standard library imports
from typing import Dict, Optional

# Local application imports
from ....domain.models.post import Post
from ....domain.models.user import User
from ....domain.repositories.post_repository import PostRepository
from ....core.errors import NotFoundError
from ...dto.post_dto import CreatorSummary, PostResponse

UNKNOWN_CREATOR_NAME = "Unknown"


def post_to_response(post: Post, creator: Optional[User]) -> PostResponse:
    """
    Build the response DTO field by field. The creator is summarized as
    {id, name}; a dangling reference keeps the id with a placeholder name.
    """
    return PostResponse(
        id=post.id or "",
        title=post.title,
        content=post.content,
        image_url=post.image_url,
        creator=CreatorSummary(
            id=creator.id if creator and creator.id else post.creator_id,
            name=creator.name if creator else UNKNOWN_CREATOR_NAME,
        ),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def posts_with_creators(posts, creators: Dict[str, User]):
    return [post_to_response(p, creators.get(p.creator_id)) for p in posts]


async def load_post(post_repository: PostRepository, post_id: str) -> Post:
    post = await post_repository.find_by_id(post_id)
    if post is None:
        raise NotFoundError("No post found!")
    return post
