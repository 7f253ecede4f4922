"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from club.domain.service import (
    COMMENT_POLICY,
    Action,
    AuthorizationService,
    CommentService,
    ContentCatalog,
)
from club.domain.value import Identity

from .target import load_comment_target


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    identity: Identity
    parent_type: str
    parent_id: UUID
    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    id: str
    deleted: bool = True


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(
        self,
        catalog: ContentCatalog,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.catalog = catalog
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the parent or the comment does not exist
            ParentMismatchError: If the comment belongs to another parent
            NotAuthorizedError: If the requester is neither author nor admin
        """
        with logfire.span(
            "delete_comment.execute",
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
                Action.DELETE,
                COMMENT_POLICY,
                resource_id=str(comment.id),
                author_id=comment.author_id,
            )

            await self.comment_service.delete_comment(comment)
            return DeleteCommentResponse(id=str(comment.id))
