"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from club.domain.model import Comment
from club.domain.repository import CommentRepository
from club.domain.value import CommentId, ParentRef
from club.persistence.mappers import comment_to_dict, row_to_comment
from club.persistence.tables import comments_table


def _parent_clause(parent: ParentRef):
    return and_(
        comments_table.c.parent_kind == parent.kind,
        comments_table.c.parent_id == parent.id,
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_parent(self, parent: ParentRef) -> List[Comment]:
        """Find all comments on a parent, newest first."""
        stmt = (
            select(comments_table)
            .where(_parent_clause(parent))
            .order_by(comments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_parent(self, parent: ParentRef) -> int:
        """Delete every comment on a parent."""
        stmt = delete(comments_table).where(_parent_clause(parent))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
