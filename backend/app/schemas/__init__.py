"""Pydantic request/response schemas for API endpoints."""

from app.schemas.dashboard import (
    CandidateDashboard,
    Document,
    RecentActivity,
    RecentMessage,
)
from app.schemas.onboarding import (
    OnboardingStatusResponse,
    OnboardingStepDefinitionResponse,
    OnboardingStepStatusResponse,
)

__all__ = [
    # Dashboard
    "CandidateDashboard",
    "Document",
    "RecentActivity",
    "RecentMessage",
    # Onboarding
    "OnboardingStatusResponse",
    "OnboardingStepDefinitionResponse",
    "OnboardingStepStatusResponse",
]
