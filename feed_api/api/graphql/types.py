"""GraphQL object and input types; identifiers are exposed as `_id`"""

from typing import List, Optional

import strawberry

from ...application.dto.auth_dto import TokenResponse
from ...application.dto.post_dto import CreatorSummary, PostListResponse, PostResponse
from ...application.dto.user_dto import UserResponse
from ...utils.datetime_utils import to_iso


@strawberry.type
class User:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    email: str
    status: str
    posts: List[strawberry.ID]

    @classmethod
    def from_dto(cls, user: UserResponse) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            status=user.status,
            posts=[strawberry.ID(post_id) for post_id in user.posts],
        )


@strawberry.type
class Creator:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str

    @classmethod
    def from_dto(cls, creator: CreatorSummary) -> "Creator":
        return cls(id=strawberry.ID(creator.id), name=creator.name)


@strawberry.type
class Post:
    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    content: str
    image_url: str
    creator: Creator
    created_at: str
    updated_at: str

    @classmethod
    def from_dto(cls, post: PostResponse) -> "Post":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            content=post.content,
            image_url=post.image_url,
            creator=Creator.from_dto(post.creator),
            created_at=to_iso(post.created_at),
            updated_at=to_iso(post.updated_at),
        )


@strawberry.type
class AuthData:
    token: str
    user_id: str

    @classmethod
    def from_dto(cls, token: TokenResponse) -> "AuthData":
        return cls(token=token.token, user_id=token.user_id)


@strawberry.type
class PostData:
    posts: List[Post]
    total_posts: int

    @classmethod
    def from_dto(cls, page: PostListResponse) -> "PostData":
        return cls(posts=[Post.from_dto(p) for p in page.posts], total_posts=page.total_items)


@strawberry.input
class UserInputData:
    email: str
    name: str
    password: str


@strawberry.input
class PostInputData:
    title: str
    content: str
    image_url: Optional[str] = None
