"""Create content use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from club.domain.service import (
    Action,
    AuthorizationService,
    ContentCatalog,
    TagService,
    UserService,
)
from club.domain.value import ContentKind, Identity, ImageUpload

from .views import ContentView, build_view


class CreateContentRequest(BaseModel):
    """Create post or project request."""

    kind: ContentKind
    identity: Identity
    title: str = Field(min_length=3, max_length=150)
    body: str = Field(min_length=10)
    tags: list[str] = Field(default_factory=list)
    main_tag: str
    image: ImageUpload | None = None

    @field_validator("title", "body", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v


class CreateContentUseCase:
    """Use case for creating a post or project."""

    def __init__(
        self,
        catalog: ContentCatalog,
        tag_service: TagService,
        user_service: UserService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize create content use case.

        Args:
            catalog: Content services by kind
            tag_service: Tag domain service
            user_service: User domain service
            authorization_service: Authorization domain service
        """
        self.catalog = catalog
        self.tag_service = tag_service
        self.user_service = user_service
        self.authorization_service = authorization_service

    async def execute(self, request: CreateContentRequest) -> ContentView:
        """Execute create content flow.

        Steps:
        1. Check the requester's role against the kind's policy
        2. Load the author for the denormalized username
        3. Resolve tags, validate invariants, upload image, save

        Raises:
            NotAuthorizedError: If the role may not create this kind
            EmptyTagSetError: If no tags were given
            InvalidMainTagError: If the main tag is not a SYSTEM tag
            ImageHostError: If the image upload fails
        """
        service = self.catalog.service_for(request.kind)
        with logfire.span(
            "create_content.execute",
            kind=request.kind.value,
            user_id=str(request.identity.user_id),
        ):
            self.authorization_service.require(
                request.identity, Action.CREATE, service.policy
            )
            author = await self.user_service.get_by_id(request.identity.user_id)

            content = await service.create(
                author_id=author.id,
                author_username=author.username,
                title=request.title,
                body=request.body,
                tag_names=request.tags,
                main_tag_name=request.main_tag,
                image=request.image,
            )
            return await build_view(content, self.tag_service)
