"""Create admin_notifications table.

Revision ID: 0001
Revises: -
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import JSONB

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

_INDEXED = ("admin_id", "type", "severity", "priority_level", "is_read")


def upgrade() -> None:
    op.create_table(
        "admin_notifications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("admin_id", sa.Integer, nullable=True),
        sa.Column(
            "type", sa.String(32), nullable=False, server_default="system"
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column(
            "severity", sa.String(16), nullable=False, server_default="info"
        ),
        sa.Column(
            "priority_level",
            sa.String(16),
            nullable=False,
            server_default="medium",
        ),
        sa.Column(
            "is_read",
            sa.Boolean,
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column("related_type", sa.String(32), nullable=True),
        sa.Column("related_id", sa.Integer, nullable=True),
        sa.Column("action_url", sa.String(500), nullable=True),
        sa.Column("metadata", JSONB, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    for column in _INDEXED:
        op.create_index(
            f"ix_admin_notifications_{column}", "admin_notifications", [column]
        )
    op.create_index(
        "ix_admin_notifications_lookup",
        "admin_notifications",
        ["admin_id", "is_read", "created_at"],
    )
    op.create_index(
        "ix_admin_notifications_type_priority",
        "admin_notifications",
        ["type", "priority_level", "created_at"],
    )


def downgrade() -> None:
    op.drop_index(
        "ix_admin_notifications_type_priority", table_name="admin_notifications"
    )
    op.drop_index("ix_admin_notifications_lookup", table_name="admin_notifications")
    for column in reversed(_INDEXED):
        op.drop_index(
            f"ix_admin_notifications_{column}", table_name="admin_notifications"
        )
    op.drop_table("admin_notifications")
