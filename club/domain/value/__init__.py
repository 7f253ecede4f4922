"""Domain value objects for the club platform."""

from club.domain.value.identifiers import (
    CommentId,
    ContentId,
    TagId,
    UserId,
)
from club.domain.value.types import (
    ContentKind,
    Identity,
    ImageUpload,
    MembershipStatus,
    Page,
    ParentRef,
    PostRef,
    ProjectRef,
    TagKind,
    TagName,
    UploadedImage,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "TagId",
    "ContentId",
    "CommentId",
    # Types
    "TagName",
    "TagKind",
    "UserRole",
    "MembershipStatus",
    "ContentKind",
    "Identity",
    "ParentRef",
    "PostRef",
    "ProjectRef",
    "ImageUpload",
    "UploadedImage",
    "Page",
]
