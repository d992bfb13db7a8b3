"""GraphQL schema: every feed operation as a query or mutation"""

import logging
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from ...application.dto.auth_dto import LoginRequest, SignupRequest
from ...application.dto.post_dto import PostInput
from ...application.use_cases.auth import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    SignupUserUseCase,
    UpdateUserStatusUseCase,
)
from ...application.use_cases.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from ...core.errors import FeedError
from .types import AuthData, Post, PostData, PostInputData, User, UserInputData

logger = logging.getLogger(__name__)


def _post_input(post_input: PostInputData) -> PostInput:
    return PostInput(title=post_input.title, content=post_input.content, image_url=post_input.image_url)


@strawberry.type
class Query:
    @strawberry.field
    async def login(self, info: Info, email: str, password: str) -> AuthData:
        use_case = info.context.container.get(LoginUserUseCase)
        token = await use_case.execute(LoginRequest(email=email, password=password))
        return AuthData.from_dto(token)

    @strawberry.field
    async def posts(self, info: Info, page: Optional[int] = None) -> PostData:
        use_case = info.context.container.get(ListPostsUseCase)
        return PostData.from_dto(await use_case.execute(info.context.auth, page))

    @strawberry.field
    async def post(self, info: Info, id: strawberry.ID) -> Post:
        use_case = info.context.container.get(GetPostUseCase)
        return Post.from_dto(await use_case.execute(info.context.auth, str(id)))

    @strawberry.field
    async def user(self, info: Info) -> User:
        use_case = info.context.container.get(GetCurrentUserUseCase)
        return User.from_dto(await use_case.execute(info.context.auth))


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_user(self, info: Info, user_input: UserInputData) -> User:
        use_case = info.context.container.get(SignupUserUseCase)
        request = SignupRequest(email=user_input.email, name=user_input.name, password=user_input.password)
        return User.from_dto(await use_case.execute(request))

    @strawberry.mutation
    async def create_post(self, info: Info, post_input: PostInputData) -> Post:
        use_case = info.context.container.get(CreatePostUseCase)
        return Post.from_dto(await use_case.execute(info.context.auth, _post_input(post_input)))

    @strawberry.mutation
    async def update_post(self, info: Info, id: strawberry.ID, post_input: PostInputData) -> Post:
        use_case = info.context.container.get(UpdatePostUseCase)
        post = await use_case.execute(info.context.auth, str(id), _post_input(post_input))
        return Post.from_dto(post)

    @strawberry.mutation
    async def delete_post(self, info: Info, id: strawberry.ID) -> bool:
        use_case = info.context.container.get(DeletePostUseCase)
        return await use_case.execute(info.context.auth, str(id))

    @strawberry.mutation
    async def update_status(self, info: Info, status: str) -> User:
        use_case = info.context.container.get(UpdateUserStatusUseCase)
        return User.from_dto(await use_case.execute(info.context.auth, status))


class FeedSchema(strawberry.Schema):
    """Schema that logs expected application errors quietly"""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, FeedError):
                logger.debug(f"GraphQL operation failed: {error.original_error.message}")
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = FeedSchema(query=Query, mutation=Mutation)
