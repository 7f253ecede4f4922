"""Delete content use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from club.domain.service import Action, AuthorizationService, CommentService, ContentCatalog
from club.domain.value import ContentId, ContentKind, Identity


class DeleteContentRequest(BaseModel):
    """Delete post or project request."""

    kind: ContentKind
    identity: Identity
    content_id: UUID


class DeleteContentResponse(BaseModel):
    """Delete post or project response."""

    id: str
    deleted: bool = True
    comments_deleted: int


class DeleteContentUseCase:
    """Use case for deleting a post or project together with its comments."""

    def __init__(
        self,
        catalog: ContentCatalog,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize delete content use case.

        Args:
            catalog: Content services by kind
            comment_service: Comment domain service
            authorization_service: Authorization domain service
        """
        self.catalog = catalog
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeleteContentRequest) -> DeleteContentResponse:
        """Execute delete content flow.

        Raises:
            NotFoundError: If the item does not exist
            NotAuthorizedError: If the requester may not delete it
        """
        service = self.catalog.service_for(request.kind)
        with logfire.span(
            "delete_content.execute",
            kind=request.kind.value,
            content_id=str(request.content_id),
        ):
            content = await service.get_by_id(ContentId(request.content_id))
            self.authorization_service.require(
                request.identity,
                Action.DELETE,
                service.policy,
                resource_id=str(content.id),
                author_id=content.author_id,
            )

            parent = self.catalog.parent_ref(request.kind.collection, content.id)
            comments_deleted = await self.comment_service.delete_comments_for_parent(
                parent
            )
            await service.delete(content)

            return DeleteContentResponse(
                id=str(content.id), comments_deleted=comments_deleted
            )
