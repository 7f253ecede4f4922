"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from club.domain.error import NotFoundError, ParentMismatchError
from club.domain.model.comment import Comment
from club.domain.repository import CommentRepository
from club.domain.value import CommentId, Identity, ParentRef, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        parent: ParentRef,
        author_id: UserId,
        author_username: str,
        content: str,
    ) -> Comment:
        """Create a comment on a post or project.

        The caller is responsible for checking that the parent exists.

        Args:
            parent: Parent reference
            author_id: Author user ID
            author_username: Author username
            content: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            parent_kind=parent.kind,
            parent_id=str(parent.id),
            author_id=str(author_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                parent=parent,
                author_id=author_id,
                author_username=author_username,
                content=content,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                parent_kind=parent.kind,
                parent_id=str(parent.id),
            )
            return saved

    async def get_comments_for_parent(self, parent: ParentRef) -> list[Comment]:
        """Get all comments on a parent, newest first."""
        with logfire.span(
            "comment_service.get_comments_for_parent",
            parent_kind=parent.kind,
            parent_id=str(parent.id),
        ):
            comments = await self.comment_repository.find_by_parent(parent)
            logfire.info("Comments retrieved", count=len(comments))
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    def ensure_parent_matches(
        self, comment: Comment, parent: ParentRef, requester: Identity
    ) -> None:
        """Reject access to a comment through a parent it does not belong to.

        Both the kind and the id of the stored parent must match.

        Raises:
            ParentMismatchError: If the parents differ
        """
        if comment.parent != parent:
            logfire.warn(
                "Comment parent mismatch",
                comment_id=str(comment.id),
                stored_kind=comment.parent.kind,
                stored_id=str(comment.parent.id),
                requested_kind=parent.kind,
                requested_id=str(parent.id),
            )
            raise ParentMismatchError(str(comment.id), str(requester.user_id))

    async def update_content(self, comment: Comment, content: str) -> Comment:
        """Replace the text of a comment."""
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment.id),
            text_length=len(content),
        ):
            # Re-validate so the length limits apply to the new text
            updated = Comment.model_validate(
                {**comment.model_dump(), "content": content, "updated_at": datetime.now()}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(saved.id))
            return saved

    async def delete_comment(self, comment: Comment) -> None:
        """Delete a comment."""
        with logfire.span("comment_service.delete_comment", comment_id=str(comment.id)):
            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=str(comment.id))

    async def delete_comments_for_parent(self, parent: ParentRef) -> int:
        """Delete every comment attached to a parent."""
        with logfire.span(
            "comment_service.delete_comments_for_parent",
            parent_kind=parent.kind,
            parent_id=str(parent.id),
        ):
            deleted = await self.comment_repository.delete_by_parent(parent)
            logfire.info("Comments deleted with parent", count=deleted)
            return deleted
