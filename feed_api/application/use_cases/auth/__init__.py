from .signup_user import SignupUserUseCase
from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase
from .get_user_status import GetUserStatusUseCase
from .update_user_status import UpdateUserStatusUseCase

__all__ = [
    "SignupUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserStatusUseCase",
    "UpdateUserStatusUseCase",
]
