"""
Authentication result attached to every request by the auth gate.

A request is either Anonymous or Authenticated(user_id). The gate never
rejects; use cases call `require_authenticated` when they need an identity.
"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ...core.errors import AuthError


@dataclass(frozen=True)
class Anonymous:
    is_authenticated: ClassVar[bool] = False
    user_id: ClassVar[Optional[str]] = None


@dataclass(frozen=True)
class Authenticated:
    user_id: str
    is_authenticated: ClassVar[bool] = True


AuthResult = Union[Anonymous, Authenticated]

ANONYMOUS = Anonymous()


def require_authenticated(auth: AuthResult) -> str:
    """Return the acting user id or raise AuthError for anonymous requests."""
    if not isinstance(auth, Authenticated):
        raise AuthError("Not authenticated!")
    return auth.user_id
