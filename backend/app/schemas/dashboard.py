"""Candidate dashboard data shapes.

Rows and aggregates the dashboard views read. Declarations only: the
views that populate and render them live elsewhere.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CandidateDashboard(BaseModel):
    """One candidate's dashboard summary row.

    Match and subscription fields are None until the candidate has an
    agent match or an active subscription.

    Attributes:
        candidate_id: Candidate UUID.
        user_id: Owning user UUID.
        full_name: Candidate display name.
        career_stage: Career stage label.
        created_at: When the candidate was created.
        match_id: Agent match UUID.
        agent_name: Matched agent's display name.
        agent_avatar: Matched agent's avatar URL.
        agent_specializations: Matched agent's specialization labels.
        agent_years_experience: Matched agent's years of experience.
        subscription_id: Subscription UUID.
        plan_name: Subscribed plan name.
        subscription_status: Subscription status label.
        current_period_end: End of the current billing period.
        jobs_used: Jobs consumed this period.
        jobs_limit: Jobs allowed this period.
        agent_hours_used: Agent hours consumed this period.
        agent_hours_limit: Agent hours allowed this period.
        saved_jobs: Count of saved jobs.
        delegated_jobs: Count of jobs delegated to the agent.
        applied_jobs: Count of applied jobs.
        interviewing_jobs: Count of jobs in interview stage.
        unread_messages: Count of unread messages.
    """

    model_config = ConfigDict(from_attributes=True)

    candidate_id: uuid.UUID
    user_id: uuid.UUID
    full_name: str
    career_stage: str
    created_at: datetime

    # Match info
    match_id: uuid.UUID | None = None
    agent_name: str | None = None
    agent_avatar: str | None = None
    agent_specializations: list[str] | None = None
    agent_years_experience: int | None = None

    # Subscription info
    subscription_id: uuid.UUID | None = None
    plan_name: str | None = None
    subscription_status: str | None = None
    current_period_end: datetime | None = None
    jobs_used: int | None = None
    jobs_limit: int | None = None
    agent_hours_used: float | None = None
    agent_hours_limit: float | None = None

    # Stats
    saved_jobs: int = 0
    delegated_jobs: int = 0
    applied_jobs: int = 0
    interviewing_jobs: int = 0
    unread_messages: int = 0


class RecentActivity(BaseModel):
    """Activity feed entry."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    activity_type: str
    description: str
    performed_by_role: str
    metadata: dict[str, Any] | None = None
    created_at: datetime


class RecentMessage(BaseModel):
    """Latest message preview with sender details."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    sender_id: uuid.UUID
    content: str
    is_read: bool
    created_at: datetime
    sender_name: str
    sender_avatar: str | None = None


class Document(BaseModel):
    """Uploaded candidate document."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    file_name: str
    document_type: str
    file_size: int = Field(ge=0)
    is_shared_with_agent: bool
    created_at: datetime
