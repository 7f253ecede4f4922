"""Get content use case."""

from uuid import UUID

from pydantic import BaseModel

from club.domain.service import ContentCatalog, TagService
from club.domain.value import ContentId, ContentKind, Identity

from .views import ContentView, build_view


class GetContentRequest(BaseModel):
    """Get post or project request."""

    kind: ContentKind
    identity: Identity
    content_id: UUID


class GetContentUseCase:
    """Use case for reading one post or project."""

    def __init__(self, catalog: ContentCatalog, tag_service: TagService) -> None:
        self.catalog = catalog
        self.tag_service = tag_service

    async def execute(self, request: GetContentRequest) -> ContentView:
        """Any authenticated identity may read.

        Raises:
            NotFoundError: If no item of this kind has the ID
        """
        service = self.catalog.service_for(request.kind)
        content = await service.get_by_id(ContentId(request.content_id))
        return await build_view(content, self.tag_service)
