"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from club.domain.model.user import User
from club.domain.value import MembershipStatus, UserId, UserRole


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        membership_status: Optional[MembershipStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Find users, newest first.

        Args:
            membership_status: Restrict to users in this membership state
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def count(
        self,
        role: Optional[UserRole] = None,
        membership_status: Optional[MembershipStatus] = None,
    ) -> int:
        """Count users matching optional role and membership filters."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            EmailAlreadyRegisteredError: If another user owns the email
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: The user's unique identifier
        """
        pass
