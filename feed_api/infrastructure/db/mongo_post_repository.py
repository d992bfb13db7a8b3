# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_user_repository import to_object_id


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: AsyncIOMotorCollection) -> None:
        self.post_collection = post_collection

    async def count(self) -> int:
        try:
            return await self.post_collection.count_documents({})
        except PyMongoError as e:
            raise RuntimeError(f"Error counting posts: {str(e)}")

    async def list_recent(self, skip: int, limit: int) -> List[Post]:
        """
        List posts ordered by creation time, most recent first

        Args:
            skip: Number of posts to skip
            limit: Maximum number of posts to return

        Returns:
            List of Post domain models
        """
        try:
            cursor = (
                self.post_collection.find({})
                .sort([(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)])
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )
            posts: List[Post] = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except PyMongoError as e:
            raise RuntimeError(f"Error listing posts: {str(e)}")

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: The post ID to find

        Returns:
            Post domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    async def save(self, post: Post) -> Post:
        """
        Save post (create new or update existing)

        created_at is set once on insert; updated_at is refreshed on every write.

        Args:
            post: Post domain model to save

        Returns:
            Saved Post domain model with ID and timestamps set
        """
        if not post:
            raise ValueError("Post cannot be None")

        now = utc_now()
        post_dict = self._post_to_dict(post)
        post_dict[PostFields.UPDATED_AT] = now

        try:
            if post.id:
                object_id = to_object_id(post.id)
                if object_id is None:
                    raise ValueError(f"Invalid post ID format: {post.id}")

                update_result = await self.post_collection.update_one(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": post_dict},
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Post with ID {post.id} not found")

                updated_document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise RuntimeError(f"Post {post.id} was updated but could not be retrieved")
                return self._document_to_post(updated_document)

            post_dict[PostFields.CREATED_AT] = now
            result = await self.post_collection.insert_one(post_dict)
            new_document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("Post was created but could not be retrieved")
            return self._document_to_post(new_document)
        except PyMongoError as e:
            raise RuntimeError(f"Error saving post: {str(e)}")

    async def delete(self, post_id: str) -> bool:
        object_id = to_object_id(post_id)
        if object_id is None:
            return False
        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting post: {str(e)}")
        return result.deleted_count > 0

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT, ""),
            image_url=document.get(PostFields.IMAGE_URL, ""),
            creator_id=str(document.get(PostFields.CREATOR, "")),
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(PostFields.UPDATED_AT)),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document (without _id and timestamps)

        The creator is stored as an ObjectId reference to the users collection.
        """
        creator_oid = to_object_id(post.creator_id)
        if creator_oid is None:
            raise ValueError(f"Invalid creator ID format: {post.creator_id}")

        return {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.IMAGE_URL: post.image_url,
            PostFields.CREATOR: creator_oid,
        }
