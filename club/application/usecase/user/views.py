"""Response models shared by user-facing use cases."""

from datetime import datetime

from pydantic import BaseModel

from club.domain.model import User


class UserView(BaseModel):
    """Account as shown to its owner and to admins. Never carries the hash."""

    id: str
    username: str
    email: str
    role: str
    membership_status: str
    membership_requested_at: datetime
    membership_reviewed_at: datetime | None
    bio: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role.value,
            membership_status=user.membership_status.value,
            membership_requested_at=user.membership_requested_at,
            membership_reviewed_at=user.membership_reviewed_at,
            bio=user.bio,
            created_at=user.created_at,
        )
