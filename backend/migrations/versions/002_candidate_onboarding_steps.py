"""Create candidate_onboarding_steps table.

Revision ID: 002_candidate_onboarding_steps
Revises: 001_users_candidates
Create Date: 2026-10-19

One row per (candidate, onboarding step). The unique constraint is the
conflict target for the reconciliation upsert.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "002_candidate_onboarding_steps"
down_revision: str | None = "001_users_candidates"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "candidate_onboarding_steps",
        sa.Column(
            "id",
            sa.UUID(),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "candidate_id",
            sa.UUID(),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("step_name", sa.String(100), nullable=False),
        sa.Column(
            "status",
            sa.String(50),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
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
        sa.UniqueConstraint(
            "candidate_id",
            "step_name",
            name="uq_candidate_onboarding_steps_candidate_step",
        ),
    )
    op.create_index(
        "ix_candidate_onboarding_steps_candidate_id",
        "candidate_onboarding_steps",
        ["candidate_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_candidate_onboarding_steps_candidate_id")
    op.drop_table("candidate_onboarding_steps")
