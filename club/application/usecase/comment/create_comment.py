"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from club.domain.service import (
    COMMENT_POLICY,
    Action,
    AuthorizationService,
    CommentService,
    ContentCatalog,
    UserService,
)
from club.domain.value import Identity

from .target import load_comment_target
from .views import CommentView


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    identity: Identity
    parent_type: str  # Route token, "posts" or "projects"
    parent_id: UUID
    content: str = Field(min_length=1, max_length=500)


class CreateCommentUseCase:
    """Use case for commenting on a post or project."""

    def __init__(
        self,
        catalog: ContentCatalog,
        comment_service: CommentService,
        user_service: UserService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            catalog: Content services by kind
            comment_service: Comment domain service
            user_service: User domain service
            authorization_service: Authorization domain service
        """
        self.catalog = catalog
        self.comment_service = comment_service
        self.user_service = user_service
        self.authorization_service = authorization_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Steps:
        1. Resolve the parent collection and verify the parent exists
        2. Check the requester's role may comment
        3. Create the comment with the route's parent reference

        Raises:
            InvalidParentTypeError: If the parent type is unknown
            NotFoundError: If the parent does not exist
            NotAuthorizedError: If the role may not comment
        """
        with logfire.span(
            "create_comment.execute",
            parent_type=request.parent_type,
            parent_id=str(request.parent_id),
            user_id=str(request.identity.user_id),
        ):
            ctx, parent = await load_comment_target(
                self.catalog,
                self.comment_service,
                request.identity,
                request.parent_type,
                request.parent_id,
            )
            self.authorization_service.require(
                ctx.identity, Action.CREATE, COMMENT_POLICY
            )
            author = await self.user_service.get_by_id(ctx.identity.user_id)

            comment = await self.comment_service.create_comment(
                parent=parent,
                author_id=author.id,
                author_username=author.username,
                content=request.content,
            )
            return CommentView.from_comment(comment)
