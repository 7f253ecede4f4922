"""User domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from club.domain.error import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from club.domain.model import User
from club.domain.repository import UserRepository
from club.domain.value import MembershipStatus, Page, UserId, UserRole
from club.util.password import hash_password, verify_password

from .base import Service


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new account.

        New accounts always start as role ``user`` with a pending membership
        request.

        Args:
            username: Display name
            email: Email address (stored lowercase)
            password: Plaintext password

        Returns:
            Created user

        Raises:
            EmailAlreadyRegisteredError: If the email is already in use
        """
        email = normalize_email(email)
        with logfire.span("user_service.register", email=email):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email", email=email)
                raise EmailAlreadyRegisteredError(email)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username.strip(),
                email=email,
                password_hash=hash_password(password),
                role=UserRole.USER,
                membership_status=MembershipStatus.PENDING,
                membership_requested_at=now,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        email = normalize_email(email)
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Invalid login attempt", email=email)
                raise AuthenticationError("Invalid credentials")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def update_profile(
        self,
        user: User,
        username: Optional[str] = None,
        email: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> User:
        """Update profile fields.

        Args:
            user: Current user
            username: New username
            email: New email
            bio: New bio

        Returns:
            Updated user

        Raises:
            ValidationError: If nothing would change
            EmailAlreadyRegisteredError: If the email belongs to someone else
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            changes: dict = {}
            if username is not None:
                changes["username"] = username.strip()
            if email is not None:
                email = normalize_email(email)
                if email != user.email:
                    other = await self.user_repository.find_by_email(email)
                    if other and other.id != user.id:
                        raise EmailAlreadyRegisteredError(email)
                changes["email"] = email
            if bio is not None:
                changes["bio"] = bio

            if not changes:
                raise ValidationError("No valid fields to update")

            changes["updated_at"] = datetime.now()
            saved = await self.user_repository.save(user.model_copy(update=changes))
            logfire.info(
                "Profile updated",
                user_id=str(user.id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def change_password(
        self, user: User, current_password: str, new_password: str
    ) -> User:
        """Replace the password after checking the current one.

        Raises:
            ValidationError: If the current password is wrong
        """
        with logfire.span("user_service.change_password", user_id=str(user.id)):
            if not verify_password(current_password, user.password_hash):
                logfire.warn("Password change with wrong current password")
                raise ValidationError("Current password is incorrect")

            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "password_hash": hash_password(new_password),
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("Password changed", user_id=str(user.id))
            return saved

    async def delete_account(self, user: User) -> None:
        """Delete an account.

        Raises:
            NotAuthorizedError: If the account is an admin
        """
        with logfire.span("user_service.delete_account", user_id=str(user.id)):
            if user.role == UserRole.ADMIN:
                raise NotAuthorizedError(
                    "User",
                    str(user.id),
                    str(user.id),
                    reason="admin accounts cannot be deleted",
                )
            await self.user_repository.delete(user.id)
            logfire.info("Account deleted", user_id=str(user.id))

    async def list_users(
        self, page: Page, membership_status: Optional[MembershipStatus] = None
    ) -> tuple[list[User], int]:
        """List users newest first.

        Returns:
            Tuple of (users on the page, total matching users)
        """
        with logfire.span(
            "user_service.list_users",
            page=page.page,
            limit=page.limit,
            membership_status=membership_status.value if membership_status else None,
        ):
            users = await self.user_repository.find_all(
                membership_status=membership_status,
                limit=page.limit,
                offset=page.offset,
            )
            total = await self.user_repository.count(membership_status=membership_status)
            return users, total

    async def count_users(
        self,
        role: Optional[UserRole] = None,
        membership_status: Optional[MembershipStatus] = None,
    ) -> int:
        """Count users by role and membership status."""
        return await self.user_repository.count(
            role=role, membership_status=membership_status
        )
