"""List users use cases for administrators."""

from pydantic import BaseModel, Field

from club.application.usecase.content.views import PaginationView
from club.application.usecase.user.views import UserView
from club.domain.service import UserService
from club.domain.value import Identity, MembershipStatus, Page

from .guard import require_admin


class ListUsersRequest(BaseModel):
    """List users request."""

    identity: Identity
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    membership_status: MembershipStatus | None = None


class ListUsersResponse(BaseModel):
    """Page of users."""

    items: list[UserView]
    pagination: PaginationView


class ListUsersUseCase:
    """Use case for paging through all accounts, newest first."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        require_admin(request.identity, "User")
        page = Page(page=request.page, limit=request.limit)
        users, total = await self.user_service.list_users(
            page, membership_status=request.membership_status
        )
        return ListUsersResponse(
            items=[UserView.from_user(u) for u in users],
            pagination=PaginationView.build(page, total),
        )


class ListPendingUsersRequest(BaseModel):
    """List pending membership requests."""

    identity: Identity
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListPendingUsersUseCase:
    """Use case for the membership review queue."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListPendingUsersRequest) -> ListUsersResponse:
        require_admin(request.identity, "User")
        page = Page(page=request.page, limit=request.limit)
        users, total = await self.user_service.list_users(
            page, membership_status=MembershipStatus.PENDING
        )
        return ListUsersResponse(
            items=[UserView.from_user(u) for u in users],
            pagination=PaginationView.build(page, total),
        )
