"""In-memory implementation of User repository for testing."""

from typing import Optional

from club.domain.error import EmailAlreadyRegisteredError
from club.domain.model import User
from club.domain.repository import UserRepository
from club.domain.value import MembershipStatus, UserId, UserRole

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._users = store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return next((u for u in self._users.values() if u.email == email), None)

    def _matching(
        self,
        role: Optional[UserRole] = None,
        membership_status: Optional[MembershipStatus] = None,
    ) -> list[User]:
        users = list(reversed(self._users.values()))
        if role is not None:
            users = [u for u in users if u.role == role]
        if membership_status is not None:
            users = [u for u in users if u.membership_status == membership_status]
        return users

    async def find_all(
        self,
        membership_status: Optional[MembershipStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        users = self._matching(membership_status=membership_status)
        users.sort(key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(
        self,
        role: Optional[UserRole] = None,
        membership_status: Optional[MembershipStatus] = None,
    ) -> int:
        return len(self._matching(role=role, membership_status=membership_status))

    async def save(self, user: User) -> User:
        other = await self.find_by_email(user.email)
        if other and other.id != user.id:
            raise EmailAlreadyRegisteredError(user.email)
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        self._users.pop(user_id, None)
