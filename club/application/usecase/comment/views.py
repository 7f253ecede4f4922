"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from club.domain.model import Comment


class CommentView(BaseModel):
    """Comment as shown to clients."""

    id: str
    parent_id: str
    parent_kind: str
    author_id: str
    author_username: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            parent_id=str(comment.parent.id),
            parent_kind=comment.parent.kind,
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
