from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_STATUS = "I am new!"


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    name: str
    hashed_password: str
    status: str = DEFAULT_STATUS
    posts: List[str] = field(default_factory=list)  # back-reference, not authoritative

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.name or not self.name.strip():
            raise ValueError("Name is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
