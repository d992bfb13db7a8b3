from .config import Settings, get_settings
from .errors import (
    FeedError,
    ValidationError,
    ConflictError,
    AuthError,
    AuthorizationError,
    NotFoundError,
)
from .security import (
    TokenService,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "FeedError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "AuthorizationError",
    "NotFoundError",
    "TokenService",
    "hash_password",
    "verify_password",
]
