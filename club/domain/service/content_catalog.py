"""Lookup of content collections by kind or route token.

Comments are addressed through ``/{parent_type}/{parent_id}/...`` routes.
The catalog turns the route token into the matching collection and is the
only place that builds ``ParentRef`` values from client input.
"""

from dataclasses import dataclass
from uuid import UUID

import logfire

from club.domain.error import InvalidParentTypeError
from club.domain.model.content import Content
from club.domain.value import ContentId, ContentKind, ParentRef, PostRef, ProjectRef

from .base import Service
from .content_service import ContentService, PostService, ProjectService


@dataclass(frozen=True)
class ParentCollection:
    """A content collection able to parent comments."""

    kind: ContentKind
    service: ContentService

    def ref(self, parent_id: UUID) -> ParentRef:
        """Reference to an item of this collection."""
        if self.kind == ContentKind.POST:
            return PostRef(id=parent_id)
        return ProjectRef(id=parent_id)


class ContentCatalog(Service):
    """Registry of content services keyed by kind."""

    def __init__(self, post_service: PostService, project_service: ProjectService) -> None:
        """Initialize content catalog.

        Args:
            post_service: Post domain service
            project_service: Project domain service
        """
        self._services: dict[ContentKind, ContentService] = {
            ContentKind.POST: post_service,
            ContentKind.PROJECT: project_service,
        }

    def service_for(self, kind: ContentKind) -> ContentService:
        """Content service handling ``kind``."""
        return self._services[kind]

    def resolve_parent_collection(self, token: str) -> ParentCollection:
        """Map a route token to its collection.

        Args:
            token: Route segment, "posts" or "projects"

        Returns:
            Matching collection

        Raises:
            InvalidParentTypeError: If the token names no known collection
        """
        for kind, service in self._services.items():
            if kind.collection == token:
                return ParentCollection(kind=kind, service=service)
        logfire.warn("Invalid parent type", token=token)
        raise InvalidParentTypeError(token)

    def parent_ref(self, token: str, parent_id: UUID) -> ParentRef:
        """Build a parent reference from route input.

        Raises:
            InvalidParentTypeError: If the token names no known collection
        """
        return self.resolve_parent_collection(token).ref(parent_id)

    async def get_parent(self, parent: ParentRef) -> Content:
        """Load the content a parent reference points at.

        Raises:
            NotFoundError: If the parent does not exist
        """
        service = self.service_for(ContentKind(parent.kind))
        return await service.get_by_id(ContentId(parent.id))
