"""Administrator routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from club.application.usecase.admin import (
    ApproveMembershipUseCase,
    DashboardRequest,
    DashboardResponse,
    DashboardUseCase,
    ListPendingUsersRequest,
    ListPendingUsersUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    RejectMembershipUseCase,
    ReviewMembershipRequest,
)
from club.application.usecase.content import TagView
from club.application.usecase.tag import CreateSystemTagRequest, CreateSystemTagUseCase
from club.application.usecase.user import UserView
from club.domain.service import JWTService
from club.domain.value import MembershipStatus

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class CreateTagAPIRequest(BaseModel):
    """API request for creating a SYSTEM tag."""

    name: str


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    membership_status: MembershipStatus | None = None,
) -> ListUsersResponse:
    """Page through all accounts, newest first."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        ListUsersRequest(
            identity=identity,
            page=page,
            limit=limit,
            membership_status=membership_status,
        )
    )


@router.get("/users/pending", response_model=ListUsersResponse)
async def list_pending_users(
    use_case: FromDishka[ListPendingUsersUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListUsersResponse:
    """Membership requests awaiting review."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        ListPendingUsersRequest(identity=identity, page=page, limit=limit)
    )


@router.patch("/users/{user_id}/approve", response_model=UserView)
async def approve_user(
    user_id: UUID,
    use_case: FromDishka[ApproveMembershipUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserView:
    """Approve a pending request; the account becomes a member."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        ReviewMembershipRequest(identity=identity, user_id=user_id)
    )


@router.patch("/users/{user_id}/reject", response_model=UserView)
async def reject_user(
    user_id: UUID,
    use_case: FromDishka[RejectMembershipUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserView:
    """Reject a pending request."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        ReviewMembershipRequest(identity=identity, user_id=user_id)
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    use_case: FromDishka[DashboardUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DashboardResponse:
    """User, content and tag counters."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(DashboardRequest(identity=identity))


@router.post(
    "/tags", response_model=TagView, status_code=status.HTTP_201_CREATED
)
async def create_system_tag(
    request: CreateTagAPIRequest,
    use_case: FromDishka[CreateSystemTagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> TagView:
    """Curate a new SYSTEM tag. Duplicate names get 409."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        CreateSystemTagRequest(identity=identity, name=request.name)
    )
