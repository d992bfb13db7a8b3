# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, LoginRequest
from ...application.dto.user_dto import StatusUpdateRequest
from ...application.use_cases.auth.signup_user import SignupUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_user_status import GetUserStatusUseCase
from ...application.use_cases.auth.update_user_status import UpdateUserStatusUseCase
from ...di.base_container import BaseContainer
from ...domain.models.auth import AuthResult
from .dependencies import get_auth_result, get_container


router = APIRouter(tags=["authentication"])


@router.put("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """
    Register a new user

    Args:
        request: Signup request (email, name, password)

    Returns:
        Confirmation message and the new user's id
    """
    signup_use_case = container.get(SignupUserUseCase)
    user = await signup_use_case.execute(request)
    return {"message": "User created!", "userId": user.id}


@router.post("/login")
async def login(
    request: LoginRequest,
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        `{token, userId}`
    """
    login_use_case = container.get(LoginUserUseCase)
    token_response = await login_use_case.execute(request)
    return token_response.to_wire()


@router.get("/status")
async def get_status(
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """Get the current user's status line"""
    status_use_case = container.get(GetUserStatusUseCase)
    result = await status_use_case.execute(auth)
    return result.to_wire()


@router.patch("/status")
async def update_status(
    request: StatusUpdateRequest,
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """Replace the current user's status line"""
    update_use_case = container.get(UpdateUserStatusUseCase)
    await update_use_case.execute(auth, request.status)
    return {"message": "User updated."}
