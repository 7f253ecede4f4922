"""Create SYSTEM tag use case."""

from pydantic import BaseModel, Field

from club.application.usecase.admin.guard import require_admin
from club.application.usecase.content.views import TagView
from club.domain.service import TagService
from club.domain.value import Identity


class CreateSystemTagRequest(BaseModel):
    """Create SYSTEM tag request."""

    identity: Identity
    name: str = Field(min_length=1, max_length=50)


class CreateSystemTagUseCase:
    """Use case for curating a new SYSTEM tag. Admin only."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: CreateSystemTagRequest) -> TagView:
        """Raises TagConflictError if a SYSTEM tag with the name exists."""
        require_admin(request.identity, "Tag")
        tag = await self.tag_service.create_system_tag(request.name)
        return TagView.from_tag(tag)
