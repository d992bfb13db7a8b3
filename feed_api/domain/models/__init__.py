from .user import User, DEFAULT_STATUS
from .post import Post
from .auth import ANONYMOUS, Anonymous, Authenticated, AuthResult, require_authenticated

__all__ = [
    "User",
    "DEFAULT_STATUS",
    "Post",
    "ANONYMOUS",
    "Anonymous",
    "Authenticated",
    "AuthResult",
    "require_authenticated",
]
