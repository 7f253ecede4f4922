"""Repository interfaces for the club domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from club.domain.repository.comment import CommentRepository
from club.domain.repository.content import (
    ContentRepository,
    PostRepository,
    ProjectRepository,
)
from club.domain.repository.tag import TagRepository
from club.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TagRepository",
    "ContentRepository",
    "PostRepository",
    "ProjectRepository",
    "CommentRepository",
]
