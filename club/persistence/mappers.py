"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from pydantic import TypeAdapter

from club.domain.model import Comment, Content, Tag, User
from club.domain.value import (
    CommentId,
    ContentId,
    ContentKind,
    MembershipStatus,
    ParentRef,
    TagId,
    TagKind,
    TagName,
    UserId,
    UserRole,
)

_parent_ref_adapter: TypeAdapter[ParentRef] = TypeAdapter(ParentRef)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        membership_status=MembershipStatus(row["membership_status"]),
        membership_requested_at=row["membership_requested_at"],
        membership_reviewed_at=row.get("membership_reviewed_at"),
        bio=row.get("bio"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    data["membership_status"] = user.membership_status.value
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    created_by = row.get("created_by")
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        kind=TagKind(row["kind"]),
        created_by=UserId(_uuid(created_by)) if created_by else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": tag.id,
        "name": tag.name.root,
        "kind": tag.kind.value,
        "created_by": tag.created_by,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_content(
    row: Dict[str, Any], kind: ContentKind, tag_ids: Sequence[Any]
) -> Content:
    """Convert a posts/projects row plus its ordered tag ids to Content.

    Args:
        row: Database row as dict
        kind: Kind stored in the table the row came from
        tag_ids: Tag ids from the junction table, in position order

    Returns:
        Content domain model
    """
    return Content(
        id=ContentId(_uuid(row["id"])),
        kind=kind,
        title=row["title"],
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        tag_ids=[TagId(_uuid(tag_id)) for tag_id in tag_ids],
        main_tag_id=TagId(_uuid(row["main_tag_id"])),
        image_url=row.get("image_url"),
        image_ref=row.get("image_ref"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def content_to_dict(content: Content) -> Dict[str, Any]:
    """Convert Content to a posts/projects row (tags excluded)."""
    return content.model_dump(exclude={"kind", "tag_ids"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        parent=_parent_ref_adapter.validate_python(
            {"kind": row["parent_kind"], "id": _uuid(row["parent_id"])}
        ),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "parent_id": comment.parent.id,
        "parent_kind": comment.parent.kind,
        "author_id": comment.author_id,
        "author_username": comment.author_username,
        "content": comment.content,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
