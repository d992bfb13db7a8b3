# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Post:
    """
    Pure domain model for Post entity - no external dependencies.

    `creator_id` is the reference id of the owning user and is the single
    source of truth for ownership. Timestamps are assigned by the store.
    """
    id: Optional[str]
    title: str
    content: str
    image_url: str
    creator_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.creator_id:
            raise ValueError("Creator is required")
        if not self.image_url:
            raise ValueError("Image URL is required")

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and str(self.creator_id) == str(user_id)
