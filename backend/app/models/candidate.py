"""Candidate and onboarding step tracking models.

Tier 1: Candidate (FK users, 1:1).
Tier 2: CandidateOnboardingStep (FK candidates), one row per
(candidate, registry step).
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.user import User

_DEFAULT_UUID = text("gen_random_uuid()")

STEP_STATUS_PENDING = "pending"
STEP_STATUS_COMPLETED = "completed"


class Candidate(Base, TimestampMixin):
    """Job seeker profile linked to a user account.

    Attributes:
        id: UUID primary key (the candidate_id elsewhere).
        user_id: Owning user; unique, so each user has at most one candidate.
        full_name: Display name shown on the dashboard.
        career_stage: Free-form career stage label from onboarding.
        onboarding_completed: True when every onboarding step was completed
            at the last reconciliation.
    """

    __tablename__ = "candidates"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=_DEFAULT_UUID,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    full_name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    career_stage: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    onboarding_completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        server_default=text("false"),
        default=False,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="candidate")
    onboarding_steps: Mapped[list["CandidateOnboardingStep"]] = relationship(
        "CandidateOnboardingStep",
        back_populates="candidate",
        cascade="all, delete-orphan",
    )


class CandidateOnboardingStep(Base, TimestampMixin):
    """Per-candidate tracking row for one onboarding step.

    Created as 'pending' by reconciliation; marked 'completed' by the
    wizard when the candidate finishes the step. Any status other than
    'completed' counts as incomplete.

    Attributes:
        id: UUID primary key.
        candidate_id: Owning candidate.
        step_name: Registry step name.
        status: 'pending', 'completed', or another store-defined value.
    """

    __tablename__ = "candidate_onboarding_steps"
    __table_args__ = (
        UniqueConstraint(
            "candidate_id",
            "step_name",
            name="uq_candidate_onboarding_steps_candidate_step",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=_DEFAULT_UUID,
    )
    candidate_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    step_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        server_default=text(f"'{STEP_STATUS_PENDING}'"),
        default=STEP_STATUS_PENDING,
    )

    # Relationships
    candidate: Mapped["Candidate"] = relationship(
        "Candidate", back_populates="onboarding_steps"
    )
