"""Onboarding completion reconciliation.

Brings a candidate's step-tracking rows in line with the step registry
and recomputes candidates.onboarding_completed from their statuses.

Sequence per candidate (each await is one store round-trip, in order):
    1. Look up the candidate by user_id. None -> not complete, stop.
    2. Read the step names already tracked. Always, even when the stored
       flag is already true: the flag is re-derived on every call.
    3. Upsert a 'pending' row for every registry step that is missing.
    4. Re-read every row's status (fresh read, sees the new rows).
    5. No rows at all -> not complete, flag left untouched.
    6. Complete iff every status is exactly 'completed'.
    7. Write the flag (and updated_at) back to the candidate.

Store failures surface as QueryError and are never recovered here. If
the flag write fails after the upsert, the inserted rows stay.
"""

import logging
import uuid
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.onboarding_steps import ONBOARDING_STEPS
from app.models.candidate import STEP_STATUS_COMPLETED
from app.repositories.candidate_repository import CandidateRepository
from app.repositories.onboarding_step_repository import OnboardingStepRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OnboardingStatus:
    """Outcome of reconciling one candidate.

    Attributes:
        candidate_id: Candidate that was reconciled.
        completed: Value written to onboarding_completed (False when the
            re-read found no rows and nothing was written).
        inserted_steps: Step names this run created, registry order.
    """

    candidate_id: uuid.UUID
    completed: bool
    inserted_steps: tuple[str, ...] = ()


@dataclass
class ReconciliationStats:
    """Counters from a reconcile_all() run."""

    candidates_checked: int = 0
    candidates_completed: int = 0
    steps_inserted: int = 0
    skipped_candidate_ids: list[uuid.UUID] = field(default_factory=list)


def _all_completed(statuses: list[str]) -> bool:
    """True iff every status is exactly 'completed'.

    Unknown and empty statuses count as pending.
    """
    return not any(status != STEP_STATUS_COMPLETED for status in statuses)


async def reconcile_onboarding(
    db: AsyncSession, user_id: uuid.UUID
) -> OnboardingStatus | None:
    """Reconcile the onboarding steps of the candidate owned by user_id.

    Args:
        db: Async database session.
        user_id: Owning user's UUID.

    Returns:
        OnboardingStatus, or None when the user has no candidate (nothing
        is read or written beyond the candidate lookup).

    Raises:
        QueryError: If any store read or write fails.
    """
    candidate = await CandidateRepository.get_by_user_id(db, user_id)
    if candidate is None:
        logger.debug("No candidate for user %s; onboarding not complete", user_id)
        return None

    candidate_id = candidate.id

    existing = set(await OnboardingStepRepository.get_step_names(db, candidate_id))
    missing = [step.name for step in ONBOARDING_STEPS if step.name not in existing]

    inserted_steps: tuple[str, ...] = ()
    if missing:
        inserted = set(
            await OnboardingStepRepository.insert_missing(db, candidate_id, missing)
        )
        # Registry order, whatever order RETURNING produced
        inserted_steps = tuple(name for name in missing if name in inserted)
        logger.info(
            "Inserted %d pending onboarding step(s) for candidate %s: %s",
            len(inserted_steps),
            candidate_id,
            ", ".join(inserted_steps),
        )

    statuses = await OnboardingStepRepository.get_statuses(db, candidate_id)
    if not statuses:
        logger.warning(
            "Candidate %s has no onboarding step rows after upsert", candidate_id
        )
        return OnboardingStatus(
            candidate_id=candidate_id,
            completed=False,
            inserted_steps=inserted_steps,
        )

    completed = _all_completed(statuses)
    await CandidateRepository.set_onboarding_completed(
        db, candidate_id, completed=completed
    )
    logger.debug(
        "Candidate %s onboarding_completed=%s (%d steps)",
        candidate_id,
        completed,
        len(statuses),
    )

    return OnboardingStatus(
        candidate_id=candidate_id,
        completed=completed,
        inserted_steps=inserted_steps,
    )


async def is_onboarding_complete(db: AsyncSession, user_id: uuid.UUID) -> bool:
    """Determine and persist whether a user's onboarding is complete.

    Args:
        db: Async database session.
        user_id: Owning user's UUID.

    Returns:
        True if every onboarding step is completed, False otherwise
        (including when the user has no candidate).

    Raises:
        QueryError: If any store read or write fails.
    """
    status = await reconcile_onboarding(db, user_id)
    if status is None:
        return False
    return status.completed


async def reconcile_all(db: AsyncSession) -> ReconciliationStats:
    """Reconcile every candidate, one after another.

    Candidates deleted between listing and reconciling are recorded in
    skipped_candidate_ids. The first QueryError aborts the run.

    Args:
        db: Async database session.

    Returns:
        ReconciliationStats for the run.
    """
    stats = ReconciliationStats()
    for candidate_id in await CandidateRepository.list_ids(db):
        user_id = await CandidateRepository.get_user_id(db, candidate_id)
        if user_id is None:
            stats.skipped_candidate_ids.append(candidate_id)
            continue

        status = await reconcile_onboarding(db, user_id)
        if status is None:
            stats.skipped_candidate_ids.append(candidate_id)
            continue

        stats.candidates_checked += 1
        stats.steps_inserted += len(status.inserted_steps)
        if status.completed:
            stats.candidates_completed += 1

    logger.info(
        "Reconciliation complete: %d candidates checked, %d completed, "
        "%d steps inserted, %d skipped",
        stats.candidates_checked,
        stats.candidates_completed,
        stats.steps_inserted,
        len(stats.skipped_candidate_ids),
    )
    return stats
