"""Comment entity.

Comments attach to exactly one post or project through a tagged parent
reference.
"""

from datetime import datetime

from pydantic import Field, field_validator

from club.domain.model.common import DomainModel
from club.domain.value import CommentId, ParentRef, UserId


class Comment(DomainModel):
    """Comment on a post or a project."""

    id: CommentId
    parent: ParentRef
    author_id: UserId
    author_username: str
    content: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v
