"""In-memory implementation of Comment repository for testing."""

from typing import List, Optional

from club.domain.model import Comment
from club.domain.repository import CommentRepository
from club.domain.value import CommentId, ParentRef

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._comments = store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_parent(self, parent: ParentRef) -> List[Comment]:
        comments = [c for c in reversed(self._comments.values()) if c.parent == parent]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        self._comments.pop(comment_id, None)

    async def delete_by_parent(self, parent: ParentRef) -> int:
        doomed = [cid for cid, c in self._comments.items() if c.parent == parent]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
