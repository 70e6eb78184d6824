"""Initial schema - users, shareable resources and their grant tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# (resource table, grant table, grant FK column)
SHAREABLE = (
    ("ai_account", "user_ai_account_access", "ai_account_id"),
    ("ai_model", "user_ai_model_access", "ai_model_id"),
    ("ai_bot", "user_ai_bot_access", "ai_bot_id"),
    ("paperless_instance", "user_paperless_instance_access", "instance_id"),
)


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
    )
    op.create_index("ix_app_user_username", "app_user", ["username"], unique=True)

    for resource_table, grant_table, fk in SHAREABLE:
        op.create_table(
            resource_table,
            sa.Column("id", sa.UUID(), primary_key=True),
            sa.Column(
                "owner_id",
                sa.Text(),
                sa.ForeignKey("app_user.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("name", sa.String(255), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index(f"ix_{resource_table}_owner_id", resource_table, ["owner_id"])

        op.create_table(
            grant_table,
            sa.Column("id", sa.UUID(), primary_key=True),
            sa.Column(
                fk,
                sa.UUID(),
                sa.ForeignKey(f"{resource_table}.id", ondelete="CASCADE"),
                nullable=False,
            ),
            # NULL user_id: granted to every user
            sa.Column(
                "user_id",
                sa.Text(),
                sa.ForeignKey("app_user.id", ondelete="CASCADE"),
                nullable=True,
            ),
            sa.Column("permission", sa.String(10), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
            sa.CheckConstraint(
                "permission IN ('READ', 'WRITE', 'FULL')",
                name=f"ck_{grant_table}_permission",
            ),
        )
        # One grant per (resource, user) and one wildcard grant per resource
        op.create_index(
            f"uq_{grant_table}_user",
            grant_table,
            [fk, "user_id"],
            unique=True,
            postgresql_where=sa.text("user_id IS NOT NULL"),
        )
        op.create_index(
            f"uq_{grant_table}_wildcard",
            grant_table,
            [fk],
            unique=True,
            postgresql_where=sa.text("user_id IS NULL"),
        )


def downgrade() -> None:
    for resource_table, grant_table, _ in reversed(SHAREABLE):
        op.drop_table(grant_table)
        op.drop_table(resource_table)
    op.drop_table("app_user")
