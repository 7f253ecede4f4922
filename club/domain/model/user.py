"""User aggregate root.

Accounts register with email and password and request membership on
sign-up. An administrator approves or rejects the request.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from club.domain.model.common import DomainModel
from club.domain.value import MembershipStatus, UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    email: str
    password_hash: str
    role: UserRole = UserRole.USER
    membership_status: MembershipStatus = MembershipStatus.PENDING
    membership_requested_at: datetime = Field(default_factory=datetime.now)
    membership_reviewed_at: Optional[datetime] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_pending(self) -> bool:
        return self.membership_status == MembershipStatus.PENDING
