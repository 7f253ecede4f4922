"""Domain model entities for the club platform."""

from club.domain.model.comment import Comment
from club.domain.model.content import Content
from club.domain.model.tag import Tag
from club.domain.model.user import User

__all__ = [
    "User",
    "Tag",
    "Content",
    "Comment",
]
