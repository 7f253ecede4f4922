"""SQLAlchemy table definitions for the club platform.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Stored lowercase
    Column("password_hash", String(255), nullable=False),
    Column(
        "role",
        postgresql.ENUM("user", "member", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "membership_status",
        postgresql.ENUM(
            "pending",
            "approved",
            "rejected",
            "expired",
            name="membership_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "membership_requested_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("membership_reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("bio", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_membership_status", users_table.c.membership_status)
Index("idx_users_created_at", users_table.c.created_at.desc())

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(50), nullable=False),
    Column(
        "kind",
        postgresql.ENUM("SYSTEM", "USER", name="tag_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "created_by",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("name", "kind", name="uq_tags_name_kind"),
)

Index("idx_tags_name", tags_table.c.name)


# ============================================================================
# CONTENT TABLES (posts, projects)
# ============================================================================
def _content_table(name: str) -> Table:
    """Posts and projects share one column layout."""
    return Table(
        name,
        metadata,
        Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
        Column("title", String(150), nullable=False),
        Column("body", Text, nullable=False),
        Column(
            "author_id",
            UUID,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        Column("author_username", String(50), nullable=False),  # Denormalized
        Column(
            "main_tag_id",
            UUID,
            ForeignKey("tags.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        Column("image_url", Text, nullable=True),
        Column("image_ref", String(255), nullable=True),
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
    )


def _content_tags_table(name: str, content_table: str) -> Table:
    """Junction table linking content to its tags, in order."""
    return Table(
        name,
        metadata,
        Column(
            "content_id",
            UUID,
            ForeignKey(f"{content_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            "tag_id",
            UUID,
            ForeignKey("tags.id", ondelete="RESTRICT"),
            primary_key=True,
        ),
        Column("position", Integer, nullable=False, server_default="0"),
    )


posts_table = _content_table("posts")
post_tags_table = _content_tags_table("post_tags", "posts")

projects_table = _content_table("projects")
project_tags_table = _content_tags_table("project_tags", "projects")

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)
Index("idx_projects_created_at", projects_table.c.created_at.desc())
Index("idx_projects_author_id", projects_table.c.author_id)
Index("idx_project_tags_tag_id", project_tags_table.c.tag_id)

# ============================================================================
# COMMENTS TABLE (polymorphic parent: post or project)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("parent_id", UUID, nullable=False),
    Column(
        "parent_kind",
        postgresql.ENUM("Post", "Project", name="comment_parent_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(50), nullable=False),  # Denormalized
    Column("content", String(500), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_parent", comments_table.c.parent_kind, comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at.desc())
