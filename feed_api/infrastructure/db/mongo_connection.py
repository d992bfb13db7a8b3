# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import Settings
from ...domain.constants import PostFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"


class MongoConnection:
    """
    Owns the MongoDB client for the lifetime of the application.

    Opened once at startup and closed at shutdown; there is no module-level
    client.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    def open(self) -> AsyncIOMotorDatabase:
        """
        Create the client and select the database. Motor connects lazily,
        so this does not perform I/O.
        """
        if self._database is not None:
            return self._database

        self._client = AsyncIOMotorClient(
            self.settings.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=self.settings.mongo_server_selection_timeout_ms,
        )
        self._database = self._client[self.settings.mongo_database_name]
        logger.info(f"MongoDB client created for database '{self.settings.mongo_database_name}'")
        return self._database

    async def ensure_indexes(self) -> None:
        """Create the indexes the repositories rely on (idempotent)"""
        await self.get_user_collection().create_index(
            [(UserFields.EMAIL, ASCENDING)], unique=True
        )
        await self.get_post_collection().create_index(
            [(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)]
        )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB client closed")
        self._client = None
        self._database = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoDB connection is not open")
        return self._database

    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB

        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]

    def get_post_collection(self) -> AsyncIOMotorCollection:
        """
        Get posts collection from MongoDB

        Returns:
            MongoDB collection for posts
        """
        return self.database[POSTS_COLLECTION]
