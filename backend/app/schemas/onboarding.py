"""Onboarding API response schemas.

Response models for the step registry and the reconciled status endpoint.
"""

import uuid

from pydantic import BaseModel, ConfigDict

from app.core.onboarding_steps import OnboardingComponent


class OnboardingStepDefinitionResponse(BaseModel):
    """Registry entry for GET /api/v1/onboarding/steps.

    Attributes:
        name: Step key.
        component: View identifier the front end renders.
        order: 1-based position in the wizard.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    component: OnboardingComponent
    order: int


class OnboardingStepStatusResponse(BaseModel):
    """Tracked step row for one candidate."""

    model_config = ConfigDict(extra="forbid", from_attributes=True)

    step_name: str
    status: str


class OnboardingStatusResponse(BaseModel):
    """Response for GET /api/v1/onboarding/status.

    Attributes:
        onboarding_completed: Result of reconciliation.
        candidate_id: The user's candidate, None if they have none yet.
        steps: Tracked step rows after reconciliation.
    """

    model_config = ConfigDict(extra="forbid")

    onboarding_completed: bool
    candidate_id: uuid.UUID | None = None
    steps: list[OnboardingStepStatusResponse] = []
