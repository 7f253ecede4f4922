"""Tag entity for categorizing posts and projects."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from club.domain.model.common import DomainModel
from club.domain.value import TagId, TagKind, TagName, UserId


class Tag(DomainModel):
    """Tag entity.

    Tags live in two namespaces. SYSTEM tags are seeded by administrators
    and anchor every piece of content as its main tag. USER tags are created
    lazily when a member references a name nobody has used before, and
    remember who created them. ``(name, kind)`` is unique.
    """

    id: TagId
    name: TagName
    kind: TagKind
    created_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_creator(self) -> "Tag":
        """USER tags must record their creator."""
        if self.kind == TagKind.USER and self.created_by is None:
            raise ValueError("USER tags require created_by")
        return self

    @property
    def is_system(self) -> bool:
        return self.kind == TagKind.SYSTEM
