"""Update comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from club.domain.service import (
    COMMENT_POLICY,
    Action,
    AuthorizationService,
    CommentService,
    ContentCatalog,
)
from club.domain.value import Identity

from .target import load_comment_target
from .views import CommentView


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    identity: Identity
    parent_type: str
    parent_id: UUID
    comment_id: UUID
    content: str = Field(min_length=1, max_length=500)


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(
        self,
        catalog: ContentCatalog,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            catalog: Content services by kind
            comment_service: Comment domain service
            authorization_service: Authorization domain service
        """
        self.catalog = catalog
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the parent or the comment does not exist
            ParentMismatchError: If the comment belongs to another parent
            NotAuthorizedError: If the requester is neither author nor admin
        """
        with logfire.span(
            "update_comment.execute",
            comment_id=str(request.comment_id),
            user_id=str(request.identity.user_id),
        ):
            ctx, _ = await load_comment_target(
                self.catalog,
                self.comment_service,
                request.identity,
                request.parent_type,
                request.parent_id,
                comment_id=request.comment_id,
            )
            comment = ctx.resource
            self.authorization_service.require(
                ctx.identity,
                Action.UPDATE,
                COMMENT_POLICY,
                resource_id=str(comment.id),
                author_id=comment.author_id,
            )

            updated = await self.comment_service.update_content(
                comment, request.content
            )
            return CommentView.from_comment(updated)
