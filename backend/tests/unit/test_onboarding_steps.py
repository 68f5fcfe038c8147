"""Tests for the onboarding step registry."""

import dataclasses

import pytest

from app.core.onboarding_steps import (
    ONBOARDING_STEPS,
    OnboardingComponent,
    OnboardingStepDefinition,
    get_step_names,
)


class TestRegistryContents:
    """The registry lists the wizard steps in presentation order."""

    def test_step_names_in_wizard_order(self) -> None:
        assert get_step_names() == (
            "step1_basic_info",
            "step2_career_info",
            "step3_resume_upload",
            "step_preference",
            "step4_consents",
        )

    def test_step_names_are_unique(self) -> None:
        names = get_step_names()
        assert len(set(names)) == len(names)

    def test_every_step_names_a_known_component(self) -> None:
        components = [step.component for step in ONBOARDING_STEPS]
        assert components == list(OnboardingComponent)

    def test_preference_step_renders_job_preference(self) -> None:
        """The unnumbered step keeps its own name and component."""
        step = next(s for s in ONBOARDING_STEPS if s.name == "step_preference")
        assert step.component is OnboardingComponent.JOB_PREFERENCE


class TestOnboardingComponent:
    """Components serialize as plain strings."""

    @pytest.mark.parametrize(
        ("component", "value"),
        [
            (OnboardingComponent.BASIC_INFO, "basic_info"),
            (OnboardingComponent.CAREER_INFO, "career_info"),
            (OnboardingComponent.RESUME_UPLOAD, "resume_upload"),
            (OnboardingComponent.JOB_PREFERENCE, "job_preference"),
            (OnboardingComponent.CONSENTS, "consents"),
        ],
    )
    def test_component_values(self, component: OnboardingComponent, value: str) -> None:
        assert component.value == value
        assert component == value


class TestStepDefinition:
    """Step definitions are immutable."""

    def test_definition_is_frozen(self) -> None:
        step = OnboardingStepDefinition("x", OnboardingComponent.CONSENTS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.name = "y"  # type: ignore[misc]

    def test_registry_is_a_tuple(self) -> None:
        """The module-level registry cannot be appended to in place."""
        with pytest.raises(AttributeError):
            ONBOARDING_STEPS.append(  # type: ignore[attr-defined]
                OnboardingStepDefinition("x", OnboardingComponent.CONSENTS)
            )
