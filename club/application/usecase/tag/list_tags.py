"""List tags use case."""

from typing import Literal

import logfire
from pydantic import BaseModel, Field

from club.application.usecase.content.views import TagView
from club.domain.service import TagService
from club.domain.value import TagKind


class ListTagsRequest(BaseModel):
    """List tags request."""

    kind: TagKind | None = None
    limit: int = Field(default=100, ge=1, le=500)
    order_by: Literal["name", "created_at"] = "name"


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagView]


class ListTagsUseCase:
    """Use case for listing available tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tags in the requested order
        """
        with logfire.span(
            "list_tags.execute",
            kind=request.kind.value if request.kind else None,
            limit=request.limit,
        ):
            tags = await self.tag_service.get_all_tags(
                kind=request.kind, limit=request.limit, order_by=request.order_by
            )
            return ListTagsResponse(tags=[TagView.from_tag(tag) for tag in tags])
