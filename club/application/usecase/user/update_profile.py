"""Update profile use case."""

from pydantic import BaseModel, EmailStr, Field

from club.domain.service import UserService
from club.domain.value import Identity

from .views import UserView


class UpdateProfileRequest(BaseModel):
    """Update profile request. Omitted fields are left unchanged."""

    identity: Identity
    username: str | None = Field(default=None, min_length=1, max_length=50)
    email: EmailStr | None = None
    bio: str | None = Field(default=None, max_length=500)


class UpdateProfileUseCase:
    """Use case for editing the requester's own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UserView:
        """Execute update profile flow.

        Raises:
            ValidationError: If no field was given
            EmailAlreadyRegisteredError: If the email belongs to someone else
        """
        user = await self.user_service.get_by_id(request.identity.user_id)
        updated = await self.user_service.update_profile(
            user,
            username=request.username,
            email=request.email,
            bio=request.bio,
        )
        return UserView.from_user(updated)
