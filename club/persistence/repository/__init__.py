"""PostgreSQL repository implementations."""

from club.persistence.repository.comment import PostgresCommentRepository
from club.persistence.repository.content import (
    PostgresContentRepository,
    PostgresPostRepository,
    PostgresProjectRepository,
)
from club.persistence.repository.tag import PostgresTagRepository
from club.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTagRepository",
    "PostgresContentRepository",
    "PostgresPostRepository",
    "PostgresProjectRepository",
    "PostgresCommentRepository",
]
