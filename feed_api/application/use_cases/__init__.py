from .auth import (
    SignupUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    GetUserStatusUseCase,
    UpdateUserStatusUseCase,
)
from .post import (
    ListPostsUseCase,
    GetPostUseCase,
    CreatePostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)
from .upload import UploadImageUseCase

__all__ = [
    "SignupUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserStatusUseCase",
    "UpdateUserStatusUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "UploadImageUseCase",
]
