"""
Create x_bookmarks table.

Holds saved X articles and external links with independent read and archive
timestamps.

Revision ID: 3f9a1c7d2b84
Revises:
Create Date: 2026-10-19 12:00:00.000000
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c7d2b84"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema - create x_bookmarks with its listing indexes."""
    op.create_table(
        "x_bookmarks",
        sa.Column("x_id", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("author", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("source_type", sa.String(length=20), nullable=False),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("archived_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("clock_timestamp()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("clock_timestamp()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "source_type IN ('x_article', 'external')",
            name="ck_x_bookmarks_source_type",
        ),
        sa.PrimaryKeyConstraint("x_id"),
    )
    op.create_index(
        op.f("ix_x_bookmarks_created_at"), "x_bookmarks", ["created_at"], unique=False,
    )
    op.create_index(
        op.f("ix_x_bookmarks_archived_at"), "x_bookmarks", ["archived_at"], unique=False,
    )


def downgrade() -> None:
    """Downgrade schema - drop x_bookmarks."""
    op.drop_index(op.f("ix_x_bookmarks_archived_at"), table_name="x_bookmarks")
    op.drop_index(op.f("ix_x_bookmarks_created_at"), table_name="x_bookmarks")
    op.drop_table("x_bookmarks")
