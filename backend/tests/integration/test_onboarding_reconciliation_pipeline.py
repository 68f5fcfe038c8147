"""Integration tests for onboarding reconciliation.

End-to-end reconciliation against a real PostgreSQL database: step
upsert, completion recompute, the flag write, concurrent callers, and
the batch run over every candidate.
"""

import asyncio
import uuid

import pytest
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.onboarding_steps import get_step_names
from app.models import Candidate, CandidateOnboardingStep, User
from app.services.onboarding_reconciliation import (
    is_onboarding_complete,
    reconcile_all,
    reconcile_onboarding,
)
from tests.conftest import TEST_CANDIDATE_ID, TEST_USER_ID

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_SECOND_USER_ID = uuid.UUID("00000000-0000-4000-a000-000000000099")
_COMPLETED = "completed"
_PENDING = "pending"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _seed_steps(
    db: AsyncSession,
    statuses: dict[str, str],
    candidate_id: uuid.UUID = TEST_CANDIDATE_ID,
) -> None:
    """Insert step rows with the given statuses and commit."""
    for step_name, status in statuses.items():
        db.add(
            CandidateOnboardingStep(
                candidate_id=candidate_id, step_name=step_name, status=status
            )
        )
    await db.commit()


async def _flag(db: AsyncSession, candidate_id: uuid.UUID = TEST_CANDIDATE_ID) -> bool:
    result = await db.execute(
        select(Candidate.onboarding_completed).where(Candidate.id == candidate_id)
    )
    return result.scalar_one()


async def _row_count(db: AsyncSession, candidate_id: uuid.UUID = TEST_CANDIDATE_ID) -> int:
    result = await db.execute(
        select(func.count())
        .select_from(CandidateOnboardingStep)
        .where(CandidateOnboardingStep.candidate_id == candidate_id)
    )
    return result.scalar_one()


# ---------------------------------------------------------------------------
# Single candidate
# ---------------------------------------------------------------------------


class TestReconcileCandidate:
    """reconcile_onboarding() against the database."""

    async def test_fresh_candidate_gets_all_pending_steps(
        self, db_session: AsyncSession, test_candidate
    ):
        result = await reconcile_onboarding(db_session, TEST_USER_ID)

        assert result is not None
        assert result.completed is False
        assert result.inserted_steps == get_step_names()
        assert await _row_count(db_session) == len(get_step_names())
        assert await _flag(db_session) is False

    async def test_all_steps_completed_sets_flag(
        self, db_session: AsyncSession, test_candidate
    ):
        await _seed_steps(db_session, {name: _COMPLETED for name in get_step_names()})

        assert await is_onboarding_complete(db_session, TEST_USER_ID) is True
        assert await _flag(db_session) is True

    async def test_new_registry_step_reopens_onboarding(
        self, db_session: AsyncSession, test_candidate
    ):
        """A candidate missing one step gets it as pending and is not complete."""
        names = get_step_names()
        await _seed_steps(db_session, {name: _COMPLETED for name in names[:-1]})

        result = await reconcile_onboarding(db_session, TEST_USER_ID)

        assert result.inserted_steps == (names[-1],)
        assert result.completed is False

    async def test_stale_true_flag_is_recomputed(
        self, db_session: AsyncSession, test_candidate
    ):
        """A stored true flag is re-derived, not trusted."""
        await db_session.execute(
            update(Candidate)
            .where(Candidate.id == TEST_CANDIDATE_ID)
            .values(onboarding_completed=True)
        )
        await _seed_steps(db_session, {name: _PENDING for name in get_step_names()})

        assert await is_onboarding_complete(db_session, TEST_USER_ID) is False
        assert await _flag(db_session) is False

    async def test_unknown_extra_step_counts_toward_completion(
        self, db_session: AsyncSession, test_candidate
    ):
        """Rows for steps no longer in the registry are kept and still count."""
        statuses = {name: _COMPLETED for name in get_step_names()}
        statuses["retired_step"] = _PENDING
        await _seed_steps(db_session, statuses)

        assert await is_onboarding_complete(db_session, TEST_USER_ID) is False
        assert await _row_count(db_session) == len(statuses)

    async def test_second_call_inserts_nothing(
        self, db_session: AsyncSession, test_candidate
    ):
        await reconcile_onboarding(db_session, TEST_USER_ID)
        again = await reconcile_onboarding(db_session, TEST_USER_ID)

        assert again.inserted_steps == ()
        assert await _row_count(db_session) == len(get_step_names())

    async def test_user_without_candidate(self, db_session: AsyncSession, test_user):
        assert await reconcile_onboarding(db_session, test_user.id) is None
        assert await is_onboarding_complete(db_session, test_user.id) is False


# ---------------------------------------------------------------------------
# Concurrent callers
# ---------------------------------------------------------------------------


class TestConcurrentReconciliation:
    """Two sessions reconciling the same candidate at once."""

    async def test_no_duplicate_rows(self, db_engine, test_candidate):
        factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

        async def _reconcile():
            async with factory() as session:
                result = await reconcile_onboarding(session, TEST_USER_ID)
                await session.commit()
                return result

        first, second = await asyncio.gather(_reconcile(), _reconcile())

        # Every step was inserted by exactly one of the two callers
        inserted = list(first.inserted_steps) + list(second.inserted_steps)
        assert sorted(inserted) == sorted(get_step_names())

        async with factory() as session:
            assert await _row_count(session) == len(get_step_names())


# ---------------------------------------------------------------------------
# Batch run
# ---------------------------------------------------------------------------


class TestReconcileAll:
    """reconcile_all() over every candidate."""

    @pytest.fixture
    async def second_candidate(self, db_session: AsyncSession, test_candidate):
        user = User(id=_SECOND_USER_ID, email="second@example.com")
        db_session.add(user)
        await db_session.flush()
        candidate = Candidate(id=uuid.uuid4(), user_id=user.id, full_name="Second")
        db_session.add(candidate)
        await db_session.commit()
        return candidate

    async def test_reconciles_every_candidate(
        self, db_session: AsyncSession, second_candidate
    ):
        await _seed_steps(
            db_session,
            {name: _COMPLETED for name in get_step_names()},
            candidate_id=second_candidate.id,
        )

        stats = await reconcile_all(db_session)

        assert stats.candidates_checked == 2
        assert stats.candidates_completed == 1
        assert stats.steps_inserted == len(get_step_names())
        assert stats.skipped_candidate_ids == []
        assert await _flag(db_session, second_candidate.id) is True
        assert await _flag(db_session) is False

    async def test_empty_database(self, db_session: AsyncSession):
        stats = await reconcile_all(db_session)
        assert stats.candidates_checked == 0
