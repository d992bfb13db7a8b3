"""
Error hierarchy shared by use cases and the REST/GraphQL boundaries.

Every use case either returns a DTO or raises exactly one FeedError subclass.
The boundary layers turn `status_code`, `message` and `data` into the
client-visible payload.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class FeedError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500

    def __init__(self, message: str, data: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.data = data


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------


class ValidationError(FeedError):
    """Raised when input violates one or more field rules."""

    status_code = 422

    def __init__(self, message: str = "Invalid input.", messages: Optional[List[str]] = None):
        super().__init__(message, data=[{"message": m} for m in (messages or [])])
        self.messages = list(messages or [])


class ConflictError(FeedError):
    """Raised when the entity being created already exists."""

    status_code = 409


# -----------------------------------------------------------------------------
# Identity and access
# -----------------------------------------------------------------------------


class AuthError(FeedError):
    """Raised for missing/invalid credentials or a failed login."""

    status_code = 401


class AuthorizationError(FeedError):
    """Raised when an authenticated user does not own the resource."""

    status_code = 403


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(FeedError):
    """Raised when a referenced entity does not exist."""

    status_code = 404
