"""Create users and candidates tables.

Revision ID: 001_users_candidates
Revises: 000_enable_extensions
Create Date: 2026-10-19

users - account foundation
candidates - 1:1 with users, carries onboarding_completed
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001_users_candidates"
down_revision: str | None = "000_enable_extensions"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_user_email", "users", ["email"], unique=True)

    op.create_table(
        "candidates",
        sa.Column(
            "id",
            sa.UUID(),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "user_id",
            sa.UUID(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("career_stage", sa.String(100), nullable=True),
        sa.Column(
            "onboarding_completed",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        *_timestamps(),
    )
    op.create_index("idx_candidate_user_id", "candidates", ["user_id"], unique=True)

    # Seed default user for local mode (DEFAULT_USER_ID)
    op.execute(
        """
        INSERT INTO users (id, email)
        VALUES ('00000000-0000-0000-0000-000000000001', 'default@local.dev')
    """
    )


def downgrade() -> None:
    op.drop_index("idx_candidate_user_id")
    op.drop_table("candidates")
    op.drop_index("idx_user_email")
    op.drop_table("users")
