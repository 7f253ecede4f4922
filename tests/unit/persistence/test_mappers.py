"""Unit tests for row/domain mappers."""

from datetime import datetime
from uuid import uuid4

from club.domain.model import Comment, Content
from club.domain.value import (
    CommentId,
    ContentId,
    ContentKind,
    PostRef,
    ProjectRef,
    TagId,
    TagKind,
    UserId,
)
from club.persistence.mappers import (
    comment_to_dict,
    content_to_dict,
    row_to_comment,
    row_to_content,
    row_to_tag,
    row_to_user,
    tag_to_dict,
    user_to_dict,
)
from tests.conftest import make_user, make_user_tag


def test_user_round_trip_uses_enum_values():
    user = make_user()

    row = user_to_dict(user)

    assert row["role"] == "member"
    assert row["membership_status"] == "approved"
    assert row_to_user(row) == user


def test_tag_row_accepts_string_ids():
    tag = make_user_tag("servo", created_by=UserId(uuid4()))
    row = {**tag_to_dict(tag), "id": str(tag.id), "created_by": str(tag.created_by)}

    restored = row_to_tag(row)

    assert restored == tag
    assert restored.kind == TagKind.USER
    assert tag_to_dict(tag)["name"] == "servo"


def test_content_row_keeps_tag_order():
    tag_ids = [TagId(uuid4()) for _ in range(3)]
    content = Content(
        id=ContentId(uuid4()),
        kind=ContentKind.PROJECT,
        title="Line follower",
        body="A small line following robot.",
        author_id=UserId(uuid4()),
        author_username="ada",
        tag_ids=tag_ids,
        main_tag_id=tag_ids[1],
    )

    row = content_to_dict(content)

    assert "kind" not in row
    assert "tag_ids" not in row
    restored = row_to_content(row, ContentKind.PROJECT, tag_ids)
    assert restored == content


def test_comment_parent_discriminator():
    parent_id = uuid4()
    now = datetime.now()
    comment = Comment(
        id=CommentId(uuid4()),
        parent=ProjectRef(id=parent_id),
        author_id=UserId(uuid4()),
        author_username="ada",
        content="Great build",
        created_at=now,
        updated_at=now,
    )

    row = comment_to_dict(comment)

    assert row["parent_kind"] == "Project"
    restored = row_to_comment(row)
    assert isinstance(restored.parent, ProjectRef)
    assert restored.parent != PostRef(id=parent_id)
    assert restored == comment
