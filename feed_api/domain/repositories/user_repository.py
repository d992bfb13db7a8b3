from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Find several users at once, keyed by ID (missing IDs are absent)"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def add_post(self, user_id: str, post_id: str) -> None:
        """Append a post reference to the user's posts (no duplicates)"""
        pass

    @abstractmethod
    async def remove_post(self, user_id: str, post_id: str) -> None:
        """Remove a post reference from the user's posts"""
        pass
