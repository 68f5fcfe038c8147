"""Onboarding wizard step registry.

Single source of truth for the steps a candidate works through before
using the platform. Tuple order is the order the wizard presents them;
reconciliation only cares about the set of names.

Each step names a symbolic component. The front end maps these to its
own views, so nothing on the backend depends on how a step is rendered.
"""

from dataclasses import dataclass
from enum import Enum


class OnboardingComponent(str, Enum):
    """View identifiers the presentation layer renders for each step."""

    BASIC_INFO = "basic_info"
    CAREER_INFO = "career_info"
    RESUME_UPLOAD = "resume_upload"
    JOB_PREFERENCE = "job_preference"
    CONSENTS = "consents"


@dataclass(frozen=True)
class OnboardingStepDefinition:
    """One onboarding step.

    Attributes:
        name: Stable key stored in candidate_onboarding_steps.step_name.
        component: View the wizard renders for this step.
    """

    name: str
    component: OnboardingComponent


ONBOARDING_STEPS: tuple[OnboardingStepDefinition, ...] = (
    OnboardingStepDefinition("step1_basic_info", OnboardingComponent.BASIC_INFO),
    OnboardingStepDefinition("step2_career_info", OnboardingComponent.CAREER_INFO),
    OnboardingStepDefinition(
        "step3_resume_upload", OnboardingComponent.RESUME_UPLOAD
    ),
    OnboardingStepDefinition("step_preference", OnboardingComponent.JOB_PREFERENCE),
    OnboardingStepDefinition("step4_consents", OnboardingComponent.CONSENTS),
)


def get_step_names() -> tuple[str, ...]:
    """Return registry step names in wizard order."""
    return tuple(step.name for step in ONBOARDING_STEPS)
