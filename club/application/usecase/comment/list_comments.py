"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from club.domain.service import CommentService, ContentCatalog
from club.domain.value import Identity

from .target import load_comment_target
from .views import CommentView


class ListCommentsRequest(BaseModel):
    """List comments request."""

    identity: Identity
    parent_type: str
    parent_id: UUID


class ListCommentsResponse(BaseModel):
    """List comments response."""

    items: list[CommentView]
    total: int


class ListCommentsUseCase:
    """Use case for listing the comments on a post or project, newest first."""

    def __init__(
        self, catalog: ContentCatalog, comment_service: CommentService
    ) -> None:
        self.catalog = catalog
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        _, parent = await load_comment_target(
            self.catalog,
            self.comment_service,
            request.identity,
            request.parent_type,
            request.parent_id,
        )
        comments = await self.comment_service.get_comments_for_parent(parent)
        return ListCommentsResponse(
            items=[CommentView.from_comment(c) for c in comments],
            total=len(comments),
        )
