"""Change password use case."""

from pydantic import BaseModel

from club.config import AuthSettings
from club.domain.error import ValidationError
from club.domain.service import UserService
from club.domain.value import Identity


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    identity: Identity
    current_password: str
    password: str
    password_confirm: str


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    changed: bool = True


class ChangePasswordUseCase:
    """Use case for replacing the requester's password."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Execute change password flow.

        Raises:
            ValidationError: If the new password is too short, the
                confirmation differs, or the current password is wrong
        """
        min_length = self.auth_settings.password_min_length
        if len(request.password) < min_length:
            raise ValidationError(f"Password must be at least {min_length} characters")
        if request.password != request.password_confirm:
            raise ValidationError("Passwords do not match")

        user = await self.user_service.get_by_id(request.identity.user_id)
        await self.user_service.change_password(
            user, request.current_password, request.password
        )
        return ChangePasswordResponse()
