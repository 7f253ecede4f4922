"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .content import (
    InMemoryContentRepository,
    InMemoryPostRepository,
    InMemoryProjectRepository,
)
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryTagRepository",
    "InMemoryContentRepository",
    "InMemoryPostRepository",
    "InMemoryProjectRepository",
    "InMemoryCommentRepository",
]
