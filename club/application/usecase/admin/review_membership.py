"""Membership review use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from club.application.usecase.user.views import UserView
from club.domain.service import MembershipService
from club.domain.value import Identity, UserId

from .guard import require_admin


class ReviewMembershipRequest(BaseModel):
    """Approve or reject request."""

    identity: Identity
    user_id: UUID


class ApproveMembershipUseCase:
    """Use case for approving a pending membership request."""

    def __init__(self, membership_service: MembershipService) -> None:
        self.membership_service = membership_service

    async def execute(self, request: ReviewMembershipRequest) -> UserView:
        """Execute approve flow.

        Raises:
            NotAuthorizedError: If the requester is not an admin
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the request is not pending
        """
        require_admin(request.identity, "User")
        with logfire.span(
            "approve_membership.execute",
            user_id=str(request.user_id),
            reviewer_id=str(request.identity.user_id),
        ):
            user = await self.membership_service.approve(UserId(request.user_id))
            return UserView.from_user(user)


class RejectMembershipUseCase:
    """Use case for rejecting a pending membership request."""

    def __init__(self, membership_service: MembershipService) -> None:
        self.membership_service = membership_service

    async def execute(self, request: ReviewMembershipRequest) -> UserView:
        """Execute reject flow.

        Raises:
            NotAuthorizedError: If the requester is not an admin
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the request is not pending
        """
        require_admin(request.identity, "User")
        with logfire.span(
            "reject_membership.execute",
            user_id=str(request.user_id),
            reviewer_id=str(request.identity.user_id),
        ):
            user = await self.membership_service.reject(UserId(request.user_id))
            return UserView.from_user(user)
