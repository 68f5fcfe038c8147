"""Repository for the candidate_onboarding_steps table.

Rows are keyed by (candidate_id, step_name). Inserts go through
INSERT ... ON CONFLICT DO NOTHING on that key so concurrent callers
that compute the same missing steps never produce duplicates.
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import QueryError
from app.models.candidate import STEP_STATUS_PENDING, CandidateOnboardingStep

logger = logging.getLogger(__name__)

_SELECT_STEPS = "select candidate_onboarding_steps"


class OnboardingStepRepository:
    """Stateless repository for CandidateOnboardingStep operations.

    All methods are static. There is no instance state. Pass an AsyncSession
    for every call so the caller controls transaction boundaries.

    Every SQLAlchemyError is logged and re-raised as QueryError.
    """

    @staticmethod
    async def get_step_names(
        db: AsyncSession, candidate_id: uuid.UUID
    ) -> list[str]:
        """Fetch the step names already tracked for a candidate.

        Args:
            db: Async database session.
            candidate_id: Candidate UUID.

        Returns:
            Step names in no particular order.

        Raises:
            QueryError: If the select fails.
        """
        stmt = select(CandidateOnboardingStep.step_name).where(
            CandidateOnboardingStep.candidate_id == candidate_id
        )
        try:
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Step name lookup failed for candidate %s: %s", candidate_id, exc)
            raise QueryError(_SELECT_STEPS) from exc

    @staticmethod
    async def get_statuses(db: AsyncSession, candidate_id: uuid.UUID) -> list[str]:
        """Fetch the status of every step row for a candidate.

        Args:
            db: Async database session.
            candidate_id: Candidate UUID.

        Returns:
            One status string per row.

        Raises:
            QueryError: If the select fails.
        """
        stmt = select(CandidateOnboardingStep.status).where(
            CandidateOnboardingStep.candidate_id == candidate_id
        )
        try:
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Step status lookup failed for candidate %s: %s", candidate_id, exc)
            raise QueryError(_SELECT_STEPS) from exc

    @staticmethod
    async def list_for_candidate(
        db: AsyncSession, candidate_id: uuid.UUID
    ) -> list[CandidateOnboardingStep]:
        """Fetch full step rows for a candidate, oldest first.

        Args:
            db: Async database session.
            candidate_id: Candidate UUID.

        Returns:
            CandidateOnboardingStep rows ordered by created_at, then step_name.

        Raises:
            QueryError: If the select fails.
        """
        stmt = (
            select(CandidateOnboardingStep)
            .where(CandidateOnboardingStep.candidate_id == candidate_id)
            .order_by(
                CandidateOnboardingStep.created_at.asc(),
                CandidateOnboardingStep.step_name.asc(),
            )
        )
        try:
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Step listing failed for candidate %s: %s", candidate_id, exc)
            raise QueryError(_SELECT_STEPS) from exc

    @staticmethod
    async def insert_missing(
        db: AsyncSession,
        candidate_id: uuid.UUID,
        step_names: Iterable[str],
    ) -> list[str]:
        """Insert a 'pending' row per step name, skipping existing keys.

        Args:
            db: Async database session.
            candidate_id: Candidate UUID the rows belong to.
            step_names: Step names to track.

        Returns:
            Step names this call actually inserted. Names another caller
            inserted first are left out.

        Raises:
            QueryError: If the insert fails.
        """
        rows = [
            {
                "candidate_id": candidate_id,
                "step_name": name,
                "status": STEP_STATUS_PENDING,
            }
            for name in step_names
        ]
        if not rows:
            return []

        stmt = (
            pg_insert(CandidateOnboardingStep)
            .values(rows)
            .on_conflict_do_nothing(
                index_elements=[
                    CandidateOnboardingStep.candidate_id,
                    CandidateOnboardingStep.step_name,
                ]
            )
            .returning(CandidateOnboardingStep.step_name)
        )
        try:
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Step insert failed for candidate %s: %s", candidate_id, exc)
            raise QueryError("insert candidate_onboarding_steps") from exc
