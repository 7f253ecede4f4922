"""Login use case."""

from pydantic import BaseModel

from club.domain.service import JWTService, UserService

from .register import TokenResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for exchanging credentials for a bearer token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Execute login flow.

        The token reflects the role and membership status stored at login
        time, so an approved member logs in again to pick up the new role.

        Raises:
            AuthenticationError: If the credentials are wrong
        """
        user = await self.user_service.authenticate(request.email, request.password)
        return TokenResponse(token=self.jwt_service.create_token(user))
