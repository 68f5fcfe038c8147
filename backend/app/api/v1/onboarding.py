"""Onboarding API router.

Endpoints:
- GET /steps: The wizard's step registry, in presentation order.
- GET /status: Reconcile the current user's step rows and report
  whether onboarding is complete.
"""

import structlog
from fastapi import APIRouter

from app.api.deps import DbSession, TenantSession
from app.core.onboarding_steps import ONBOARDING_STEPS
from app.core.responses import DataResponse
from app.repositories.onboarding_step_repository import OnboardingStepRepository
from app.schemas.onboarding import (
    OnboardingStatusResponse,
    OnboardingStepDefinitionResponse,
    OnboardingStepStatusResponse,
)

logger = structlog.get_logger()

router = APIRouter()


@router.get("/steps")
async def list_onboarding_steps() -> DataResponse[list[OnboardingStepDefinitionResponse]]:
    """List the onboarding wizard steps.

    Returns:
        DataResponse with one entry per step: name, component, 1-based order.
    """
    return DataResponse(
        data=[
            OnboardingStepDefinitionResponse(
                name=step.name, component=step.component, order=index
            )
            for index, step in enumerate(ONBOARDING_STEPS, start=1)
        ]
    )


@router.get("/status")
async def get_onboarding_status(
    scoped: TenantSession,
    db: DbSession,
) -> DataResponse[OnboardingStatusResponse]:
    """Reconcile and return the current user's onboarding status.

    Creates any missing step rows as 'pending' and writes the recomputed
    onboarding_completed flag before responding. A user with no candidate
    gets onboarding_completed=false and no steps.

    Args:
        scoped: Database session bound to the current user (injected).
        db: Database session (injected) for reading the step rows back.

    Returns:
        DataResponse with onboarding_completed, candidate_id, and steps.

    Raises:
        QueryError: If the data store fails (503).
    """
    result = await scoped.reconcile_onboarding()
    if result is None:
        return DataResponse(data=OnboardingStatusResponse(onboarding_completed=False))

    if result.inserted_steps:
        logger.info(
            "Onboarding steps created",
            candidate_id=str(result.candidate_id),
            steps=list(result.inserted_steps),
        )

    rows = await OnboardingStepRepository.list_for_candidate(db, result.candidate_id)
    return DataResponse(
        data=OnboardingStatusResponse(
            onboarding_completed=result.completed,
            candidate_id=result.candidate_id,
            steps=[OnboardingStepStatusResponse.model_validate(row) for row in rows],
        )
    )
