# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...core.security import TokenService
from ...domain.models.auth import ANONYMOUS, Authenticated, AuthResult

logger = logging.getLogger(__name__)

USER_ID_CLAIM = "userId"


class AuthGate:
    """
    Resolves a request's bearer credential into an AuthResult.

    Never rejects: a missing, malformed, expired or otherwise invalid token
    yields ANONYMOUS and the request continues. Authorization decisions are
    left to each use case.
    """

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def resolve_token(self, token: Optional[str]) -> AuthResult:
        if not token:
            return ANONYMOUS
        try:
            payload = self.token_service.decode_token(token)
        except ValueError as e:
            logger.debug(f"Rejected bearer token: {e}")
            return ANONYMOUS

        user_id = payload.get(USER_ID_CLAIM)
        if not user_id:
            return ANONYMOUS
        return Authenticated(user_id=str(user_id))
