"""Update content use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field, field_validator

from club.application.context import RequestContext
from club.domain.service import Action, AuthorizationService, ContentCatalog, TagService
from club.domain.value import ContentId, ContentKind, Identity, ImageUpload

from .views import ContentView, build_view


class UpdateContentRequest(BaseModel):
    """Partial update of a post or project.

    ``tags`` and ``main_tag`` must be given together.
    """

    kind: ContentKind
    identity: Identity
    content_id: UUID
    title: str | None = Field(default=None, min_length=3, max_length=150)
    body: str | None = Field(default=None, min_length=10)
    tags: list[str] | None = None
    main_tag: str | None = None
    image: ImageUpload | None = None

    @field_validator("title", "body", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v


class UpdateContentUseCase:
    """Use case for updating a post or project."""

    def __init__(
        self,
        catalog: ContentCatalog,
        tag_service: TagService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize update content use case.

        Args:
            catalog: Content services by kind
            tag_service: Tag domain service
            authorization_service: Authorization domain service
        """
        self.catalog = catalog
        self.tag_service = tag_service
        self.authorization_service = authorization_service

    async def execute(self, request: UpdateContentRequest) -> ContentView:
        """Execute update content flow.

        Raises:
            NotFoundError: If the item does not exist
            NotAuthorizedError: If the requester may not update it
            ValidationError: If only one of tags/main tag is given
            InvalidMainTagError: If the main tag is not a SYSTEM tag
        """
        service = self.catalog.service_for(request.kind)
        with logfire.span(
            "update_content.execute",
            kind=request.kind.value,
            content_id=str(request.content_id),
            user_id=str(request.identity.user_id),
        ):
            content = await service.get_by_id(ContentId(request.content_id))
            ctx = RequestContext(identity=request.identity).with_resource(content)

            self.authorization_service.require(
                ctx.identity,
                Action.UPDATE,
                service.policy,
                resource_id=str(content.id),
                author_id=content.author_id,
            )

            updated = await service.update(
                content,
                requester_id=ctx.identity.user_id,
                title=request.title,
                body=request.body,
                tag_names=request.tags,
                main_tag_name=request.main_tag,
                image=request.image,
            )
            return await build_view(updated, self.tag_service)
