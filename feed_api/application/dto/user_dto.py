from typing import List

from pydantic import Field

from .base import CamelModel


class UserResponse(CamelModel):
    """DTO for user response (no password)"""
    id: str
    email: str
    name: str
    status: str
    posts: List[str] = Field(default_factory=list)


class StatusResponse(CamelModel):
    status: str


class StatusUpdateRequest(CamelModel):
    status: str
