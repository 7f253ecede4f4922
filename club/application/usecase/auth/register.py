"""Register use case."""

import logfire
from pydantic import BaseModel, EmailStr, Field

from club.config import AuthSettings
from club.domain.error import ValidationError
from club.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Bearer token issued on register and login."""

    token: str


class RegisterUseCase:
    """Use case for creating an account with a pending membership request."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing the token
            auth_settings: Password policy
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def execute(self, request: RegisterRequest) -> TokenResponse:
        """Execute register flow.

        Raises:
            ValidationError: If the password is too short
            EmailAlreadyRegisteredError: If the email is already in use
        """
        min_length = self.auth_settings.password_min_length
        if len(request.password) < min_length:
            raise ValidationError(f"Password must be at least {min_length} characters")

        with logfire.span("register.execute", email=request.email):
            user = await self.user_service.register(
                username=request.username,
                email=request.email,
                password=request.password,
            )
            return TokenResponse(token=self.jwt_service.create_token(user))
