# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, UploadFile
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.requests import HTTPConnection

# Local application imports
from ...application.dto.upload_dto import ImageUpload
from ...application.services.auth_gate import AuthGate
from ...di.base_container import BaseContainer
from ...domain.models.auth import ANONYMOUS, AuthResult


# Anonymous requests are allowed through; use cases decide what needs a user
security_scheme = HTTPBearer(auto_error=False)


def get_container(connection: HTTPConnection) -> BaseContainer:
    """
    FastAPI dependency returning the DI container built during lifespan startup

    Works for both HTTP requests and WebSocket connections.
    """
    return connection.app.state.container


async def get_auth_result(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    container: BaseContainer = Depends(get_container),
) -> AuthResult:
    """
    FastAPI dependency resolving the bearer token into an AuthResult

    Args:
        credentials: HTTP Bearer token credentials, if the header was sent
        container: DI container

    Returns:
        Authenticated for a valid token, ANONYMOUS otherwise
    """
    if credentials is None:
        return ANONYMOUS
    auth_gate: AuthGate = container.get(AuthGate)
    return auth_gate.resolve_token(credentials.credentials)


async def read_image_upload(upload: Optional[UploadFile]) -> Optional[ImageUpload]:
    """Read a multipart file into an ImageUpload, or None when nothing was sent"""
    if upload is None or not upload.filename:
        return None
    data = await upload.read()
    return ImageUpload(filename=upload.filename, content_type=upload.content_type, data=data)
