"""Shared state for in-memory repositories.

Repositories are request-scoped while the store lives for the whole
container, so data written in one request is visible to the next.
"""

from dataclasses import dataclass, field

from club.domain.model import Comment, Content, Tag, User
from club.domain.value import CommentId, ContentId, ContentKind, TagId, UserId


@dataclass
class InMemoryStore:
    """Dictionaries standing in for database tables."""

    users: dict[UserId, User] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    content: dict[ContentKind, dict[ContentId, Content]] = field(
        default_factory=lambda: {kind: {} for kind in ContentKind}
    )
    comments: dict[CommentId, Comment] = field(default_factory=dict)
