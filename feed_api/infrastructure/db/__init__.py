from .mongo_connection import MongoConnection
from .mongo_user_repository import MongoUserRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "MongoConnection",
    "MongoUserRepository",
    "MongoPostRepository",
]
