from ....domain.models.user import User
from ...dto.user_dto import UserResponse


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        email=user.email,
        name=user.name,
        status=user.status,
        posts=list(user.posts),
    )
