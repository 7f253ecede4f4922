"""Get current user use case."""

from pydantic import BaseModel

from club.application.usecase.user.views import UserView
from club.domain.service import UserService
from club.domain.value import Identity


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    identity: Identity


class GetCurrentUserUseCase:
    """Use case for loading the account behind a bearer token."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Raises NotFoundError if the account was deleted after the token was issued."""
        user = await self.user_service.get_by_id(request.identity.user_id)
        return UserView.from_user(user)
