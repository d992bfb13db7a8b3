from .base import CamelModel
from .auth_dto import SignupRequest, LoginRequest, TokenResponse
from .user_dto import UserResponse, StatusResponse, StatusUpdateRequest
from .post_dto import PostInput, CreatorSummary, PostResponse, PostListResponse
from .upload_dto import ImageUpload, ImageUploadResponse

__all__ = [
    "CamelModel",
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    "StatusResponse",
    "StatusUpdateRequest",
    "PostInput",
    "CreatorSummary",
    "PostResponse",
    "PostListResponse",
    "ImageUpload",
    "ImageUploadResponse",
]
