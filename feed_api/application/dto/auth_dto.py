from .base import CamelModel


class SignupRequest(CamelModel):
    """DTO for user signup request (field rules are checked by the use case)"""
    email: str = ""
    name: str = ""
    password: str = ""


class LoginRequest(CamelModel):
    """DTO for user login request"""
    email: str
    password: str


class TokenResponse(CamelModel):
    """DTO for authentication token response"""
    token: str
    user_id: str
