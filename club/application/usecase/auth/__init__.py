"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase, TokenResponse

__all__ = [
    "TokenResponse",
    "RegisterRequest",
    "RegisterUseCase",
    "LoginRequest",
    "LoginUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
]
