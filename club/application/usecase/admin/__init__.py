"""Administrator use cases."""

from .dashboard import DashboardRequest, DashboardResponse, DashboardUseCase
from .guard import require_admin
from .list_users import (
    ListPendingUsersRequest,
    ListPendingUsersUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
)
from .review_membership import (
    ApproveMembershipUseCase,
    RejectMembershipUseCase,
    ReviewMembershipRequest,
)

__all__ = [
    "require_admin",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "ListPendingUsersRequest",
    "ListPendingUsersUseCase",
    "ReviewMembershipRequest",
    "ApproveMembershipUseCase",
    "RejectMembershipUseCase",
    "DashboardRequest",
    "DashboardResponse",
    "DashboardUseCase",
]
