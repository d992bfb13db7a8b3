from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class PostInput(CamelModel):
    """DTO for post create/update input"""
    title: str = ""
    content: str = ""
    image_url: Optional[str] = None


class CreatorSummary(CamelModel):
    id: str
    name: str


class PostResponse(CamelModel):
    """DTO for post response with the creator resolved"""
    id: str
    title: str
    content: str
    image_url: str
    creator: CreatorSummary
    created_at: datetime
    updated_at: datetime


class PostListResponse(CamelModel):
    posts: List[PostResponse] = Field(default_factory=list)
    total_items: int = 0
