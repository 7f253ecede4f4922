"""Taggable content entity shared by posts and projects."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from club.domain.model.common import DomainModel
from club.domain.value import ContentId, ContentKind, TagId, UserId


class Content(DomainModel):
    """Post or project.

    Both kinds carry the same shape and tag invariants; ``kind`` decides
    which collection stores the entity and which access policy applies.

    Tag invariants (checked by ``ContentService.validate_invariants`` before
    every write):
    - ``tag_ids`` is non-empty
    - ``main_tag_id`` is one of ``tag_ids``
    - the main tag exists and is a SYSTEM tag
    """

    id: ContentId
    kind: ContentKind
    title: str = Field(min_length=3, max_length=150)
    body: str = Field(min_length=10)
    author_id: UserId
    author_username: str
    tag_ids: list[TagId] = Field(default_factory=list)
    main_tag_id: TagId
    image_url: Optional[str] = None
    image_ref: Optional[str] = None  # Asset identifier at the image host
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "body", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v
