"""initial_schema

Create the foundational schema for the Robotics Club:
- Users (email/password accounts with a membership request)
- Tags (SYSTEM and USER namespaces, unique per name and kind)
- Posts and projects (shared layout, ordered tag junction tables)
- Comments (polymorphic parent: post or project)
- Seed SYSTEM tags

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 10:12:04.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "user_role": ("user", "member", "admin"),
    "membership_status": ("pending", "approved", "rejected", "expired"),
    "tag_kind": ("SYSTEM", "USER"),
    "comment_parent_kind": ("Post", "Project"),
}

SYSTEM_TAGS = [
    "robotics",
    "electronics",
    "programming",
    "mechanics",
    "ai",
    "events",
    "tutorials",
    "competitions",
    "hardware",
    "software",
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
    ]


def _create_content_tables(name: str, junction: str) -> None:
    op.create_table(
        name,
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(50), nullable=False),
        sa.Column("main_tag_id", sa.UUID(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("image_ref", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["main_tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.CheckConstraint("char_length(title) >= 3", name=f"ck_{name}_title_length"),
        sa.CheckConstraint("char_length(body) >= 10", name=f"ck_{name}_body_length"),
    )
    op.create_index(
        f"idx_{name}_created_at", name, [sa.text("created_at DESC")]
    )
    op.create_index(f"idx_{name}_author_id", name, ["author_id"])

    op.create_table(
        junction,
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), server_default="0", nullable=False),
        sa.PrimaryKeyConstraint("content_id", "tag_id"),
        sa.ForeignKeyConstraint(["content_id"], [f"{name}.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
    )
    op.create_index(f"idx_{junction}_tag_id", junction, ["tag_id"])


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for enum_name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {enum_name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM(*ENUMS["user_role"], name="user_role", create_type=False),
            server_default="user",
            nullable=False,
        ),
        sa.Column(
            "membership_status",
            postgresql.ENUM(
                *ENUMS["membership_status"], name="membership_status", create_type=False
            ),
            server_default="pending",
            nullable=False,
        ),
        sa.Column(
            "membership_requested_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("membership_reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("idx_users_membership_status", "users", ["membership_status"])
    op.create_index("idx_users_created_at", "users", [sa.text("created_at DESC")])

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column(
            "kind",
            postgresql.ENUM(*ENUMS["tag_kind"], name="tag_kind", create_type=False),
            nullable=False,
        ),
        sa.Column("created_by", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.UniqueConstraint("name", "kind", name="uq_tags_name_kind"),
    )
    op.create_index("idx_tags_name", "tags", ["name"])

    # ========================================================================
    # POSTS / PROJECTS tables
    # ========================================================================
    _create_content_tables("posts", "post_tags")
    _create_content_tables("projects", "project_tags")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("parent_id", sa.UUID(), nullable=False),
        sa.Column(
            "parent_kind",
            postgresql.ENUM(
                *ENUMS["comment_parent_kind"], name="comment_parent_kind", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(50), nullable=False),
        sa.Column("content", sa.String(500), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_comments_parent", "comments", ["parent_kind", "parent_id"])
    op.create_index(
        "idx_comments_created_at", "comments", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # Seed SYSTEM tags
    # ========================================================================
    tags_table = sa.table(
        "tags",
        sa.column("name", sa.String),
        sa.column(
            "kind", postgresql.ENUM(*ENUMS["tag_kind"], name="tag_kind", create_type=False)
        ),
    )
    op.bulk_insert(tags_table, [{"name": name, "kind": "SYSTEM"} for name in SYSTEM_TAGS])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comments")
    op.drop_table("project_tags")
    op.drop_table("projects")
    op.drop_table("post_tags")
    op.drop_table("posts")
    op.drop_table("tags")
    op.drop_table("users")

    for enum_name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {enum_name}")
