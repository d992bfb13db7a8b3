# Standard library imports
from typing import Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.errors import ConflictError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import DEFAULT_STATUS, User
from ...domain.constants import UserFields


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse an ObjectId string, returning None for malformed values"""
    if not value:
        return None
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        object_ids = [oid for oid in (to_object_id(u) for u in set(user_ids)) if oid is not None]
        if not object_ids:
            return {}

        users: Dict[str, User] = {}
        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            async for document in cursor:
                user = self._document_to_user(document)
                users[user.id] = user
        except PyMongoError as e:
            raise RuntimeError(f"Error listing users by ID: {str(e)}")
        return users

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If another user already has this email
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                # posts is only changed through add_post/remove_post
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.POSTS}},
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
                return self._document_to_user(updated_document)

            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")
            return self._document_to_user(new_document)
        except DuplicateKeyError:
            raise ConflictError("User exists already!")
        except PyMongoError as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def add_post(self, user_id: str, post_id: str) -> None:
        await self._update_posts(user_id, post_id, "$addToSet")

    async def remove_post(self, user_id: str, post_id: str) -> None:
        await self._update_posts(user_id, post_id, "$pull")

    async def _update_posts(self, user_id: str, post_id: str, operator: str) -> None:
        user_oid = to_object_id(user_id)
        post_oid = to_object_id(post_id)
        if user_oid is None or post_oid is None:
            raise ValueError(f"Invalid ID format: user={user_id} post={post_id}")
        try:
            await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_oid},
                {operator: {UserFields.POSTS: post_oid}},
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error updating posts of user {user_id}: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            name=document.get(UserFields.NAME, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            status=document.get(UserFields.STATUS, DEFAULT_STATUS),
            posts=[str(p) for p in document.get(UserFields.POSTS, [])],
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        post_ids: List[ObjectId] = [oid for oid in (to_object_id(p) for p in user.posts) if oid is not None]
        return {
            UserFields.EMAIL: user.email,
            UserFields.NAME: user.name,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.STATUS: user.status,
            UserFields.POSTS: post_ids,
        }
