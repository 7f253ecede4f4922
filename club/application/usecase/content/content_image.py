"""Image replacement and removal use cases."""

from uuid import UUID

from pydantic import BaseModel

from club.domain.service import Action, AuthorizationService, ContentCatalog, TagService
from club.domain.value import ContentId, ContentKind, Identity, ImageUpload

from .views import ContentView, build_view


class UploadContentImageRequest(BaseModel):
    """Replace the image of a post or project."""

    kind: ContentKind
    identity: Identity
    content_id: UUID
    image: ImageUpload


class RemoveContentImageRequest(BaseModel):
    """Remove the image of a post or project."""

    kind: ContentKind
    identity: Identity
    content_id: UUID


class _ContentImageUseCase:
    def __init__(
        self,
        catalog: ContentCatalog,
        tag_service: TagService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.catalog = catalog
        self.tag_service = tag_service
        self.authorization_service = authorization_service

    async def _load_for_update(
        self, kind: ContentKind, identity: Identity, content_id: UUID
    ):
        service = self.catalog.service_for(kind)
        content = await service.get_by_id(ContentId(content_id))
        self.authorization_service.require(
            identity,
            Action.UPDATE,
            service.policy,
            resource_id=str(content.id),
            author_id=content.author_id,
        )
        return service, content


class UploadContentImageUseCase(_ContentImageUseCase):
    """Use case for uploading a new image, replacing any previous one."""

    async def execute(self, request: UploadContentImageRequest) -> ContentView:
        service, content = await self._load_for_update(
            request.kind, request.identity, request.content_id
        )
        updated = await service.replace_image(content, request.image)
        return await build_view(updated, self.tag_service)


class RemoveContentImageUseCase(_ContentImageUseCase):
    """Use case for removing the hosted image.

    Raises:
        NotFoundError: If there is no hosted image
    """

    async def execute(self, request: RemoveContentImageRequest) -> ContentView:
        service, content = await self._load_for_update(
            request.kind, request.identity, request.content_id
        )
        updated = await service.remove_image(content)
        return await build_view(updated, self.tag_service)
