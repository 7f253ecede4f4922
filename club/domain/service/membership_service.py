"""Membership review workflow.

A membership request moves from ``pending`` to either ``approved`` (the
account becomes a member) or ``rejected``. Each decision is followed by a
notification email; mail failures never undo a decision.
"""

from abc import ABC, abstractmethod
from datetime import datetime

import logfire

from club.domain.error import BusinessRuleViolationError, NotFoundError
from club.domain.model import User
from club.domain.repository import UserRepository
from club.domain.value import MembershipStatus, UserId, UserRole

from .base import Service


class Mailer(ABC):
    """Transactional email sender.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def send_approval(self, username: str, email: str) -> None:
        """Tell a user their membership was approved."""
        pass

    @abstractmethod
    async def send_rejection(self, username: str, email: str) -> None:
        """Tell a user their membership was rejected."""
        pass


class MembershipService(Service):
    """Domain service for reviewing membership requests."""

    def __init__(self, user_repository: UserRepository, mailer: Mailer) -> None:
        """Initialize membership service.

        Args:
            user_repository: User repository
            mailer: Email sender for review notifications
        """
        self.user_repository = user_repository
        self.mailer = mailer

    async def approve(self, user_id: UserId) -> User:
        """Approve a pending membership and promote the user to member.

        Raises:
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the request is not pending
        """
        with logfire.span("membership_service.approve", user_id=str(user_id)):
            user = await self._load_pending(user_id)
            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "membership_status": MembershipStatus.APPROVED,
                        "role": UserRole.MEMBER,
                        "membership_reviewed_at": datetime.now(),
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("Membership approved", user_id=str(user_id))

            try:
                await self.mailer.send_approval(saved.username, saved.email)
            except Exception as e:
                logfire.error(
                    "Failed to send approval email",
                    user_id=str(user_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
            return saved

    async def reject(self, user_id: UserId) -> User:
        """Reject a pending membership. The role is left unchanged.

        Raises:
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the request is not pending
        """
        with logfire.span("membership_service.reject", user_id=str(user_id)):
            user = await self._load_pending(user_id)
            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "membership_status": MembershipStatus.REJECTED,
                        "membership_reviewed_at": datetime.now(),
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("Membership rejected", user_id=str(user_id))

            try:
                await self.mailer.send_rejection(saved.username, saved.email)
            except Exception as e:
                logfire.error(
                    "Failed to send rejection email",
                    user_id=str(user_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
            return saved

    async def _load_pending(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        if not user.is_pending:
            logfire.warn(
                "Membership review on non-pending user",
                user_id=str(user_id),
                status=user.membership_status.value,
            )
            raise BusinessRuleViolationError("User is not pending")
        return user
