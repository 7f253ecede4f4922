"""Domain value objects for the club platform.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from math import ceil
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import Field, field_validator

from club.domain.value.common import RootValueObject, ValueObject
from club.domain.value.identifiers import UserId


class TagKind(str, Enum):
    """Tag namespace.

    SYSTEM tags are curated by administrators and are the only tags allowed
    as a main tag. USER tags are created on demand by members.
    """

    SYSTEM = "SYSTEM"
    USER = "USER"


class UserRole(str, Enum):
    """Role of an account."""

    USER = "user"
    MEMBER = "member"
    ADMIN = "admin"


class MembershipStatus(str, Enum):
    """State of a membership request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    EXPIRED = "expired"


class ContentKind(str, Enum):
    """Kind of taggable content.

    The value doubles as the discriminator stored on comments.
    """

    POST = "Post"
    PROJECT = "Project"

    @property
    def collection(self) -> str:
        """Route token naming the collection of this kind."""
        return {ContentKind.POST: "posts", ContentKind.PROJECT: "projects"}[self]


class TagName(RootValueObject[str]):
    """Normalized tag name.

    Input is trimmed and lowercased, so "Robotics ", "robotics" and
    " ROBOTICS" all produce the same name.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag name must be 1-50 characters")
        return v


class Identity(ValueObject):
    """Authenticated requester, as asserted by a verified bearer token."""

    user_id: UserId
    role: UserRole
    membership_status: MembershipStatus

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class PostRef(ValueObject):
    """Reference to a post acting as a comment parent."""

    kind: Literal["Post"] = "Post"
    id: UUID


class ProjectRef(ValueObject):
    """Reference to a project acting as a comment parent."""

    kind: Literal["Project"] = "Project"
    id: UUID


ParentRef = Annotated[Union[PostRef, ProjectRef], Field(discriminator="kind")]


class ImageUpload(ValueObject):
    """Image bytes received from a client."""

    data: bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


class UploadedImage(ValueObject):
    """Result of storing an image with the image host."""

    url: str
    asset_ref: str


class Page(ValueObject):
    """Page/limit pagination window."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        """Number of pages needed to show ``total`` items."""
        return ceil(total / self.limit) if total else 0
