from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def count(self) -> int:
        """Count all posts"""
        pass

    @abstractmethod
    async def list_recent(self, skip: int, limit: int) -> List[Post]:
        """List posts ordered by creation time, most recent first"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save post (create or update); the store maintains timestamps"""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID, returning whether a record was removed"""
        pass
