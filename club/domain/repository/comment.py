"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from club.domain.model.comment import Comment
from club.domain.value import CommentId, ParentRef


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_parent(self, parent: ParentRef) -> List[Comment]:
        """Find all comments on a post or project, newest first.

        Args:
            parent: Parent reference

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_parent(self, parent: ParentRef) -> int:
        """Delete every comment attached to a parent.

        Args:
            parent: Parent reference

        Returns:
            Number of deleted comments
        """
        pass
