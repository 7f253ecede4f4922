"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from club.domain.error import EmailAlreadyRegisteredError
from club.domain.model import User
from club.domain.repository import UserRepository
from club.domain.value import MembershipStatus, UserId, UserRole
from club.persistence.mappers import row_to_user, user_to_dict
from club.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email.lower())
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_all(
        self,
        membership_status: Optional[MembershipStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[User]:
        """Find users, newest first."""
        stmt = select(users_table)
        if membership_status is not None:
            stmt = stmt.where(users_table.c.membership_status == membership_status.value)
        stmt = stmt.order_by(users_table.c.created_at.desc()).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        role: Optional[UserRole] = None,
        membership_status: Optional[MembershipStatus] = None,
    ) -> int:
        """Count users."""
        stmt = select(func.count()).select_from(users_table)
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        if membership_status is not None:
            stmt = stmt.where(users_table.c.membership_status == membership_status.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        try:
            async with self.session.begin_nested():
                if existing:
                    stmt = (
                        update(users_table)
                        .where(users_table.c.id == user.id)
                        .values(**user_dict)
                    )
                else:
                    stmt = insert(users_table).values(**user_dict)
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise EmailAlreadyRegisteredError(user.email) from e

        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
