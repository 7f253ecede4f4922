"""PostgreSQL implementation of the content repositories."""

from collections import defaultdict
from typing import Any, ClassVar, Optional

from sqlalchemy import Table, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from club.domain.model import Content
from club.domain.repository import ContentRepository, PostRepository, ProjectRepository
from club.domain.value import ContentId, ContentKind, TagId
from club.persistence.mappers import content_to_dict, row_to_content
from club.persistence.tables import (
    post_tags_table,
    posts_table,
    project_tags_table,
    projects_table,
)


class PostgresContentRepository(ContentRepository):
    """Content repository over one content table and its tag junction.

    Subclasses bind the tables and the kind.
    """

    kind: ClassVar[ContentKind]
    table: ClassVar[Table]
    tags_table: ClassVar[Table]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _tag_ids_for(self, content_ids: list[Any]) -> dict[Any, list[Any]]:
        if not content_ids:
            return {}
        stmt = (
            select(self.tags_table.c.content_id, self.tags_table.c.tag_id)
            .where(self.tags_table.c.content_id.in_(content_ids))
            .order_by(self.tags_table.c.content_id, self.tags_table.c.position)
        )
        result = await self.session.execute(stmt)
        tag_ids: dict[Any, list[Any]] = defaultdict(list)
        for content_id, tag_id in result.fetchall():
            tag_ids[content_id].append(tag_id)
        return tag_ids

    async def _to_domain(self, rows: list[dict[str, Any]]) -> list[Content]:
        tag_ids = await self._tag_ids_for([row["id"] for row in rows])
        return [
            row_to_content(row, self.kind, tag_ids.get(row["id"], [])) for row in rows
        ]

    def _filtered(self, stmt, tag_ids: Optional[list[TagId]], query: Optional[str]):
        if tag_ids is not None:
            tagged = select(self.tags_table.c.content_id).where(
                self.tags_table.c.tag_id.in_(tag_ids)
            )
            stmt = stmt.where(self.table.c.id.in_(tagged))
        if query:
            stmt = stmt.where(
                or_(
                    self.table.c.title.icontains(query, autoescape=True),
                    self.table.c.body.icontains(query, autoescape=True),
                )
            )
        return stmt

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find content by ID."""
        stmt = select(self.table).where(self.table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._to_domain([row._asdict()]))[0]

    async def find_all(
        self,
        tag_ids: Optional[list[TagId]] = None,
        query: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Content]:
        """Find content, newest first."""
        stmt = self._filtered(select(self.table), tag_ids, query)
        stmt = stmt.order_by(self.table.c.created_at.desc()).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return await self._to_domain([row._asdict() for row in result.fetchall()])

    async def count(
        self,
        tag_ids: Optional[list[TagId]] = None,
        query: Optional[str] = None,
    ) -> int:
        """Count content matching the filters."""
        stmt = self._filtered(
            select(func.count()).select_from(self.table), tag_ids, query
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, content: Content) -> Content:
        """Save content and replace its tag links."""
        content_dict = content_to_dict(content)

        exists = await self.session.execute(
            select(self.table.c.id).where(self.table.c.id == content.id)
        )
        if exists.fetchone():
            await self.session.execute(
                update(self.table)
                .where(self.table.c.id == content.id)
                .values(**content_dict)
            )
        else:
            await self.session.execute(insert(self.table).values(**content_dict))

        await self.session.execute(
            delete(self.tags_table).where(self.tags_table.c.content_id == content.id)
        )
        if content.tag_ids:
            await self.session.execute(
                insert(self.tags_table),
                [
                    {"content_id": content.id, "tag_id": tag_id, "position": position}
                    for position, tag_id in enumerate(content.tag_ids)
                ],
            )

        await self.session.flush()
        return content

    async def delete(self, content_id: ContentId) -> None:
        """Delete content; tag links cascade."""
        await self.session.execute(delete(self.table).where(self.table.c.id == content_id))
        await self.session.flush()


class PostgresPostRepository(PostgresContentRepository, PostRepository):
    """PostgreSQL repository for posts."""

    kind = ContentKind.POST
    table = posts_table
    tags_table = post_tags_table


class PostgresProjectRepository(PostgresContentRepository, ProjectRepository):
    """PostgreSQL repository for projects."""

    kind = ContentKind.PROJECT
    table = projects_table
    tags_table = project_tags_table
