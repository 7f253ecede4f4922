"""List content use case."""

import logfire
from pydantic import BaseModel, Field

from club.domain.service import ContentCatalog, TagService
from club.domain.value import ContentKind, Identity, Page

from .views import ContentListResponse, PaginationView, build_views


class ListContentRequest(BaseModel):
    """List posts or projects request."""

    kind: ContentKind
    identity: Identity
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    tag: str | None = None  # Exact tag name, either namespace
    q: str | None = None  # Substring of title or body


class ListContentUseCase:
    """Use case for listing posts or projects with filtering and pagination."""

    def __init__(self, catalog: ContentCatalog, tag_service: TagService) -> None:
        """Initialize list content use case.

        Args:
            catalog: Content services by kind
            tag_service: Tag domain service
        """
        self.catalog = catalog
        self.tag_service = tag_service

    async def execute(self, request: ListContentRequest) -> ContentListResponse:
        """Execute list content flow.

        Args:
            request: List request with filters and pagination

        Returns:
            Page of content, newest first
        """
        service = self.catalog.service_for(request.kind)
        page = Page(page=request.page, limit=request.limit)
        with logfire.span(
            "list_content.execute",
            kind=request.kind.value,
            page=page.page,
            limit=page.limit,
            tag=request.tag,
            q=request.q,
        ):
            items, total = await service.list_content(
                page, tag=request.tag, query=request.q
            )
            return ContentListResponse(
                items=await build_views(items, self.tag_service),
                pagination=PaginationView.build(page, total),
            )
