"""Delete account use case."""

from pydantic import BaseModel

from club.domain.service import UserService
from club.domain.value import Identity


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    identity: Identity


class DeleteAccountResponse(BaseModel):
    """Delete account response."""

    id: str
    deleted: bool = True


class DeleteAccountUseCase:
    """Use case for deleting the requester's own account.

    Admin accounts cannot delete themselves.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        user = await self.user_service.get_by_id(request.identity.user_id)
        await self.user_service.delete_account(user)
        return DeleteAccountResponse(id=str(user.id))
