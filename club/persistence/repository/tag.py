"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import case, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from club.domain.error import TagConflictError
from club.domain.model.tag import Tag
from club.domain.repository.tag import TagRepository
from club.domain.value import TagId, TagKind, TagName
from club.persistence.mappers import row_to_tag, tag_to_dict
from club.persistence.tables import tags_table

# SYSTEM sorts before USER when a name exists in both namespaces
_system_first = case((tags_table.c.kind == TagKind.SYSTEM.value, 0), else_=1)


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        The write runs in a SAVEPOINT so a uniqueness violation does not
        abort the surrounding request transaction.
        """
        tag_dict = tag_to_dict(tag)
        existing = await self.find_by_id(tag.id)

        try:
            async with self.session.begin_nested():
                if existing:
                    stmt = (
                        update(tags_table)
                        .where(tags_table.c.id == tag.id)
                        .values(**tag_dict)
                    )
                else:
                    stmt = insert(tags_table).values(**tag_dict)
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise TagConflictError(tag.name.root, tag.kind.value) from e

        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        if not tag_ids:
            return []
        stmt = select(tags_table).where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_name(
        self, name: TagName, kind: Optional[TagKind] = None
    ) -> Optional[Tag]:
        """Find tag by name, SYSTEM first when kind is not given."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        if kind is not None:
            stmt = stmt.where(tags_table.c.kind == kind.value)
        stmt = stmt.order_by(_system_first).limit(1)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find tags of any kind by name in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(
        self,
        kind: Optional[TagKind] = None,
        limit: int = 100,
        order_by: str = "name",
    ) -> list[Tag]:
        """Find all tags."""
        stmt = select(tags_table)
        if kind is not None:
            stmt = stmt.where(tags_table.c.kind == kind.value)

        if order_by == "created_at":
            stmt = stmt.order_by(tags_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(tags_table.c.name, _system_first)

        result = await self.session.execute(stmt.limit(limit))
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def count(self, kind: Optional[TagKind] = None) -> int:
        """Count tags."""
        stmt = select(func.count()).select_from(tags_table)
        if kind is not None:
            stmt = stmt.where(tags_table.c.kind == kind.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()
